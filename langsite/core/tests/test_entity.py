from unittest.mock import patch

from django.core.cache import cache
from django.db import DatabaseError
from django.test import TestCase, override_settings
from domain.models import Domain
from subject.models import Subject

from core.config import SITE_CONFIG, ConfigFactory
from core.entity import (
    EntityKind,
    EntityStorage,
    EntityTypeDescriptor,
    EntityTypeManager,
    get_entity_translation,
    save_entity,
)
from core.exceptions import EntityStorageError, InvalidPluginDefinitionError, PluginNotFoundError
from core.modules import ModuleHandler


class EntityTypeManagerTests(TestCase):
    def setUp(self):
        cache.clear()
        self.manager = EntityTypeManager()

    # -------------------------
    # get_definitions()
    # -------------------------
    def test_definitions_only_contain_flagged_models(self):
        definitions = self.manager.get_definitions()

        self.assertIn("domain.domain", definitions)
        self.assertIn("subject.subject", definitions)
        self.assertIn("language.language", definitions)
        self.assertIn("core.siteconfig", definitions)
        self.assertNotIn("auth.user", definitions)
        self.assertNotIn("translation.translationmetadata", definitions)
        # modèles de traduction parler : pas des types d'entité
        self.assertNotIn("domain.domaintranslation", definitions)

    def test_content_and_config_kinds(self):
        definitions = self.manager.get_definitions()

        self.assertIs(definitions["domain.domain"].kind, EntityKind.CONTENT)
        self.assertTrue(definitions["domain.domain"].is_content_entity())
        self.assertIs(definitions["language.language"].kind, EntityKind.CONFIG)
        self.assertFalse(definitions["core.siteconfig"].is_content_entity())

    def test_langcode_key(self):
        definitions = self.manager.get_definitions()

        self.assertTrue(definitions["domain.domain"].has_key("langcode"))
        self.assertEqual(definitions["domain.domain"].get_key("langcode"), "langcode")
        self.assertFalse(definitions["language.language"].has_key("langcode"))

    def test_key_pointing_to_missing_field(self):
        descriptor = EntityTypeDescriptor(
            id="domain.domain", model=Domain, kind=EntityKind.CONTENT, keys={"langcode": "lang"},
        )
        self.assertFalse(descriptor.has_key("langcode"))

    def test_translatable(self):
        definitions = self.manager.get_definitions()

        self.assertTrue(definitions["domain.domain"].is_translatable())
        self.assertTrue(definitions["subject.subject"].is_translatable())
        self.assertFalse(definitions["language.language"].is_translatable())

    # -------------------------
    # get_storage()
    # -------------------------
    def test_unknown_type_raises_plugin_not_found(self):
        with self.assertRaises(PluginNotFoundError):
            self.manager.get_storage("nope.nope")

    def test_abstract_model_raises_invalid_definition(self):
        from core.models import ContentEntity

        descriptor = EntityTypeDescriptor(id="core.contententity", model=ContentEntity, kind=EntityKind.CONTENT)
        with patch.object(EntityTypeManager, "get_definition", return_value=descriptor):
            with self.assertRaises(InvalidPluginDefinitionError):
                self.manager.get_storage("core.contententity")

    def test_storage_loads_all_entities_keyed_by_pk(self):
        d1 = Domain.objects.create(langcode="en")
        d2 = Domain.objects.create(langcode="fr")

        storage = self.manager.get_storage("domain.domain")

        self.assertIsInstance(storage, EntityStorage)
        self.assertEqual(storage.type_id, "domain.domain")
        self.assertEqual(storage.load_multiple(), {d1.pk: d1, d2.pk: d2})

    def test_load_database_error_is_wrapped(self):
        storage = self.manager.get_storage("domain.domain")
        with patch.object(EntityStorage, "get_queryset", side_effect=DatabaseError("no such table: domain_domain")):
            with self.assertRaises(EntityStorageError) as ctx:
                storage.load_multiple()
        self.assertIn("no such table", str(ctx.exception))

    def test_storage_save_persists(self):
        subject = Subject.objects.create(langcode="en")
        subject.langcode = "nl"

        self.manager.get_storage("subject.subject").save(subject)

        self.assertEqual(Subject.objects.get(pk=subject.pk).langcode, "nl")


class SaveEntityTests(TestCase):
    def test_database_error_becomes_storage_error(self):
        domain = Domain.objects.create(langcode="en")
        with patch.object(Domain, "save", side_effect=DatabaseError("database is locked")):
            with self.assertRaises(EntityStorageError) as ctx:
                save_entity(domain)
        self.assertIn("database is locked", str(ctx.exception))
        self.assertIn(f"Domain #{domain.pk}", str(ctx.exception))

    def test_connection_still_usable_after_failure(self):
        domain = Domain.objects.create(langcode="en")
        with patch.object(Domain, "save", side_effect=DatabaseError("boom")):
            with self.assertRaises(EntityStorageError):
                save_entity(domain)

        domain.langcode = "fr"
        save_entity(domain)
        self.assertEqual(Domain.objects.get(pk=domain.pk).langcode, "fr")


class GetEntityTranslationTests(TestCase):
    def setUp(self):
        cache.clear()
        self.domain = Domain.objects.create(langcode="en")
        self.domain.set_current_language("de")
        self.domain.name = "Wasserball"
        self.domain.save()

    def test_existing_translation(self):
        translation = get_entity_translation(self.domain, "de")
        self.assertEqual(translation.language_code, "de")
        self.assertEqual(translation.name, "Wasserball")

    def test_missing_translation_returns_none(self):
        self.assertIsNone(get_entity_translation(self.domain, "it"))

    def test_database_error_becomes_storage_error(self):
        with patch.object(Domain, "has_translation", side_effect=DatabaseError("translations table locked")):
            with self.assertRaises(EntityStorageError) as ctx:
                get_entity_translation(self.domain, "de")
        self.assertIn("translations table locked", str(ctx.exception))
        self.assertIn(f"Domain #{self.domain.pk} (de)", str(ctx.exception))


@override_settings(LANGUAGE_CODE="en")
class ContentEntityDefaultLangcodeTests(TestCase):
    def test_new_content_uses_settings_language(self):
        self.assertEqual(Domain.objects.create().langcode, "en")

    def test_new_content_uses_configured_default(self):
        ConfigFactory().get_editable(SITE_CONFIG).set("default_langcode", "nl").save()
        self.assertEqual(Domain.objects.create().langcode, "nl")


class ModuleHandlerTests(TestCase):
    def test_module_exists(self):
        handler = ModuleHandler()
        self.assertTrue(handler.module_exists("translation"))
        self.assertTrue(handler.module_exists("language"))
        self.assertFalse(handler.module_exists("content_translation"))

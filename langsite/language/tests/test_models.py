from django.core.exceptions import ValidationError
from django.db import IntegrityError
from django.test import TestCase

from language.models import Language


class LangModelTests(TestCase):
    def test_defaults(self):
        l = Language.objects.create(code="fr", name="Français")
        self.assertEqual(l.active, True)
        self.assertEqual(l.direction, Language.Direction.LTR)

    def test_str(self):
        l = Language.objects.create(code="nl", name="Nederlands")
        self.assertEqual(str(l), "nl — Nederlands")

    def test_meta_ordering(self):
        Language.objects.create(code="nl", name="Nederlands")
        Language.objects.create(code="en", name="English")
        Language.objects.create(code="fr", name="Français")

        codes = list(Language.objects.all().values_list("code", flat=True))
        self.assertEqual(codes, ["en", "fr", "nl"])  # ordering = ["code"]

    def test_code_unique_constraint(self):
        Language.objects.create(code="fr", name="Français")
        with self.assertRaises(IntegrityError):
            Language.objects.create(code="fr", name="French (duplicate)")

    def test_code_required(self):
        l = Language(code="", name="Français")
        with self.assertRaises(ValidationError) as ctx:
            l.full_clean()
        self.assertIn("code", ctx.exception.message_dict)

    def test_code_max_length(self):
        # max_length=12 => 13 doit échouer au full_clean
        l = Language(code="x" * 13, name="Too long")
        with self.assertRaises(ValidationError) as ctx:
            l.full_clean()
        self.assertIn("code", ctx.exception.message_dict)

    def test_direction_rejects_unknown_value_on_full_clean(self):
        l = Language(code="fr", name="Français", direction="up")
        with self.assertRaises(ValidationError) as ctx:
            l.full_clean()
        self.assertIn("direction", ctx.exception.message_dict)

    def test_rtl_language(self):
        l = Language.objects.create(code="ar", name="العربية", direction=Language.Direction.RTL)
        l.refresh_from_db()
        self.assertEqual(l.direction, "rtl")

    # -------------------------
    # normalize_direction()
    # -------------------------
    def test_normalize_direction_keeps_known_values(self):
        self.assertEqual(Language.normalize_direction("ltr"), "ltr")
        self.assertEqual(Language.normalize_direction("rtl"), "rtl")
        self.assertEqual(Language.normalize_direction(Language.Direction.RTL), "rtl")

    def test_normalize_direction_falls_back_to_ltr(self):
        for value in (None, "", "RTL", "right-to-left", "ttb", 1):
            with self.subTest(value=value):
                self.assertEqual(Language.normalize_direction(value), "ltr")

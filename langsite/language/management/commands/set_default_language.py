from django.core.management.base import BaseCommand

from language.exceptions import LanguageStorageError
from language.migrator import DefaultLanguageMigrator, MigrationStatus
from language.models import Language


class Command(BaseCommand):
    help = "Set the default language (created if missing) and move existing content to it."

    def add_arguments(self, parser):
        parser.add_argument("langcode", help="Language code.")
        parser.add_argument("name", help="Language name.")
        parser.add_argument(
            "direction",
            nargs="?",
            default=Language.Direction.LTR.value,
            help="Language direction: ltr (default) or rtl. Any other value falls back to ltr.",
        )

    def get_migrator(self) -> DefaultLanguageMigrator:
        return DefaultLanguageMigrator.create()

    def handle(self, *args, **options):
        langcode = options["langcode"]

        try:
            result = self.get_migrator().run(langcode, options["name"], options["direction"])
        except LanguageStorageError as e:
            self.stderr.write(self.style.ERROR(
                f"The language could not be saved due to the following error: {e}"
            ))
            return

        if result.status is MigrationStatus.NOOP:
            self.stdout.write("The language is already set as default.")
            return

        if result.created:
            self.stdout.write(self.style.SUCCESS(f'Created "{langcode}" language.'))

        for type_id, count in result.retagged.items():
            self.stdout.write(f"✔ {type_id} → {count} entity(ies) moved to {langcode}")

        self.stdout.write(self.style.SUCCESS(
            f"✅ Default language is now {langcode} (was {result.previous_langcode}): "
            f"{result.total_retagged} entity(ies), {result.translations_updated} translation(s) updated"
        ))

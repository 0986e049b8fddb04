from .set_default_language import Command as SetDefaultLanguageCommand


class Command(SetDefaultLanguageCommand):
    help = "Alias of set_default_language."

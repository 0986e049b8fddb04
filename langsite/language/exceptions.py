class LanguageStorageError(Exception):
    """La langue n'a pas pu être enregistrée."""

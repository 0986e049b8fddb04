# core/exceptions.py


class EntityError(Exception):
    """Base des erreurs de la couche entités (stockage, définitions)."""


class PluginNotFoundError(EntityError):
    """Le type d'entité demandé n'existe pas."""


class InvalidPluginDefinitionError(EntityError):
    """Le type d'entité existe mais ne peut pas fournir de stockage."""


class EntityStorageError(EntityError):
    """Chargement ou sauvegarde impossible (erreur base de données, validation...)."""

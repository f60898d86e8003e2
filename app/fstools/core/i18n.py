"""Translation table for user-facing filesystem error messages.

Messages are looked up by an uppercase key. The default table is in
French; callers merge additional or overriding entries at startup.
Unknown keys resolve to the ``UNKNOWN_ERROR`` entry, or to an explicit
default message when one has been configured.
"""

import logging
from collections.abc import Mapping

logger = logging.getLogger(__name__)

UNKNOWN_ERROR_KEY = "UNKNOWN_ERROR"

DEFAULT_TRANSLATIONS: dict[str, str] = {
    UNKNOWN_ERROR_KEY: "Erreur de type inconnu",
    # Files
    "FAILED_COPYING_FILE": "Échec de la copie",
    "FAILED_DELETING_FILE": "Échec de la suppression",
    "FAILED_WRITING_FILE": "Impossible d'écrire le fichier",
    "FILE_CANNOT_FIND_SOURCE": "Impossible de trouver le fichier source",
    "FILE_ALREADY_EXISTS": "Le fichier existe déjà",
    "UNABLE_TO_FIND_SOURCE_FILE": "Impossible de trouver ou de lire le fichier",
    "FAILED_RENAMING_FILE": "Échec du renommage",
    "UNABLE_TO_READ_FILE": "Impossible d'ouvrir le fichier",
    "UNABLE_TO_MODIFY_FILE_PERMISSIONS": "Impossible de modifier les permissions du fichier.",
    "UNABLE_TO_MODIFY_MOVE_UPLOADED_FILE": "Impossible de déplacer le fichier uploadé.",
    # Folders
    "FAILED_FINDING_SOURCE_FOLDER": "Impossible de trouver le répertoire source",
    "FAILED_COPYING_FOLDER": "Impossible de copier le répertoire",
    "FOLDER_ALREADY_EXISTS": "Le répertoire existe déjà",
    "FAILED_CREATING_FOLDER": "Impossible de créer le répertoire cible",
    "FAILED_READING_SOURCE_FOLDER": "Impossible d'ouvrir le répertoire source",
    "FOLDER_LOOP": "Boucle infinie détectée",
    "FOLDER_PATH_IS_NOT_IN_OPEN_BASEDIR": "Le chemin n'est pas dans les chemins open_basedir",
    "FAILED_DELETING_FOLDER": "Impossible de supprimer le répertoire.",
    "FOLDER_CANNOT_DELETE_ROOT": "Vous ne pouvez pas supprimer un répertoire de base.",
    "FAILED_RENAMING_FOLDER": "Échec du renommage",
    "FOLDER_PATH_IS_NOT_A_FOLDER": "Le chemin n'est pas un répertoire.",
    # Archives (keys only, archive handling lives elsewhere)
    "INVALID_ZIP_DATA": "Données ZIP invalides",
    "ARCHIVE_UNABLE_TO_LOAD": "Impossible de charger l'archive",
    "ARCHIVE_UNABLE_TO_READ": "Impossible de lire l'archive (%s)",
    "ARCHIVE_UNABLE_TO_WRITE": "Impossible d'écrire l'archive (%s)",
    "ARCHIVE_UNABLE_TO_WRITE_FILE": "Impossible d'écrire le fichier (%s)",
    "ARCHIVE_UNABLE_TO_WRITE_ENTRY": "Impossible d'écrire l'entrée (%s)",
    "ARCHIVE_UNABLE_TO_DECOMPRESS": "Impossible de décompresser les données",
    "ARCHIVE_UNABLE_TO_CREATE_DESTINATION": "Impossible de créer la destination",
    "ARCHIVE_UNABLE_TO_READ_ENTRY": "Impossible de lire l'entrée",
    "ARCHIVE_UNABLE_TO_OPEN_ARCHIVE": "Impossible d'ouvrir l'archive",
    "ARCHIVE_ZIP_INFO_FAILED": "Échec de l'obtention de l'information ZIP",
}


class Translator:
    """Mutable translation table with case-insensitive lookup.

    Each Translator owns its own copy of the table, so merging into one
    instance never affects another.

    Args:
        translations: Entries merged over the French defaults.
        default_message: Message returned for unknown keys instead of
            the ``UNKNOWN_ERROR`` entry.
    """

    def __init__(
        self,
        translations: Mapping[str, str] | None = None,
        default_message: str | None = None,
    ) -> None:
        self._table: dict[str, str] = dict(DEFAULT_TRANSLATIONS)
        self._default_message = default_message
        if translations:
            self.merge(translations)

    @property
    def default_message(self) -> str:
        """Message used for keys missing from the table."""
        if self._default_message is not None:
            return self._default_message
        return self._table[UNKNOWN_ERROR_KEY]

    def set_default_message(self, message: str | None) -> None:
        """Set (or clear with None) the message used for unknown keys."""
        self._default_message = message

    def merge(self, translations: Mapping[str, str]) -> None:
        """Merge entries into the table, overriding existing keys.

        Keys are uppercased so that later lookups stay case-insensitive.
        """
        for key, message in translations.items():
            self._table[key.upper()] = message
        logger.debug("Merged %d translation entries", len(translations))

    def has(self, key: str) -> bool:
        """Return True if the key has an entry in the table."""
        return key.upper() in self._table

    def get(self, key: str, *args: object) -> str:
        """Look up the message for a key.

        Args:
            key: Translation key (any case).
            *args: Values substituted into ``%s`` placeholders.

        Returns:
            The translated message, or the default message for unknown keys.
        """
        message = self._table.get(key.upper())
        if message is None:
            return self.default_message
        if args:
            try:
                return message % args
            except (TypeError, ValueError):
                logger.debug("Placeholder mismatch for translation key %s", key)
        return message

    def describe(self, key: str, *, path: str | None = None, detail: str | None = None) -> str:
        """Compose a user-facing failure message.

        The translated message is followed by the offending path and,
        when available, the low-level detail in parentheses.
        """
        message = self.get(key)
        if path:
            message = f"{message} : {path}"
        if detail:
            message = f"{message} - ({detail})"
        return message

    def as_dict(self) -> dict[str, str]:
        """Return a copy of the current table."""
        return dict(self._table)

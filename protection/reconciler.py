import enum
import logging
import os
from dataclasses import dataclass, field

from .directory import SENTINEL_CONTENT
from .rules import generate_rules

logger = logging.getLogger(__name__)


class ReconcileStatus(enum.Enum):
    FRESH = "fresh"            # vérification récente, rien à faire
    RECONCILED = "reconciled"  # état sur disque vérifié conforme
    FAILED = "failed"          # passe tentée mais écriture ou vérification en échec


@dataclass
class ReconcileResult:
    status: ReconcileStatus
    written: list = field(default_factory=list)
    errors: list = field(default_factory=list)

    @property
    def ok(self):
        return self.status is not ReconcileStatus.FAILED


class ProtectionReconciler:
    """
    Garantit que le dossier protégé contient un .htaccess à jour et un fichier
    sentinelle vide.

    Idempotent : sans changement extérieur entre deux appels, le second
    n'écrit rien. Les erreurs du système de fichiers sont contenues ici et
    remontées dans le ReconcileResult, jamais à la requête appelante.
    L'horodatage de vérification n'avance qu'après une passe dont l'état sur
    disque a été relu et trouvé conforme.
    """

    def __init__(self, directory, origin, state, deny_extensions=()):
        self.directory = directory
        self.origin = origin
        self.state = state
        self.deny_extensions = tuple(deny_extensions or ())

    def expected_rules(self):
        return generate_rules(self.origin, self.deny_extensions)

    def reconcile(self, force=False):
        if not force and self.state.is_fresh():
            return ReconcileResult(ReconcileStatus.FRESH)

        result = ReconcileResult(ReconcileStatus.RECONCILED)
        path = self.directory.path

        try:
            os.makedirs(path, exist_ok=True)
        except OSError as e:
            logger.error(f"Impossible de créer le dossier protégé {path}: {e}")
            result.status = ReconcileStatus.FAILED
            result.errors.append(str(e))
            return result

        rules = self.expected_rules()
        htaccess = self.directory.htaccess_path
        writable = os.access(path, os.W_OK)

        if os.path.exists(htaccess):
            contents = self._read(htaccess)
            if not contents or contents != rules:
                # Règles absentes, corrompues ou périmées : on réécrit
                self._write(htaccess, rules, result)
        elif writable:
            self._write(htaccess, rules, result)
        else:
            logger.warning(f"Dossier protégé non inscriptible, .htaccess non créé : {path}")

        sentinel = self.directory.sentinel_path
        if not os.path.isfile(sentinel):
            if writable:
                self._write(sentinel, SENTINEL_CONTENT, result)
            else:
                logger.warning(f"Dossier protégé non inscriptible, sentinelle non créée : {path}")

        if self._verify(rules):
            result.status = ReconcileStatus.RECONCILED
            self.state.mark_checked()
            if result.written:
                logger.info(f"Fichiers de protection mis à jour dans {path}: {', '.join(result.written)}")
        else:
            result.status = ReconcileStatus.FAILED
            logger.warning(f"Fichiers de protection non conformes dans {path}, nouvelle tentative à la prochaine vérification")
        return result

    def _read(self, file_path):
        try:
            with open(file_path, "r", encoding="utf-8", newline="") as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Lecture impossible de {file_path}: {e}")
            return ""

    def _write(self, file_path, content, result):
        try:
            with open(file_path, "w", encoding="utf-8", newline="") as f:
                f.write(content)
        except OSError as e:
            logger.error(f"Écriture impossible de {file_path}: {e}")
            result.errors.append(f"{os.path.basename(file_path)}: {e}")
            return False
        result.written.append(os.path.basename(file_path))
        return True

    def _verify(self, rules):
        if not os.path.exists(self.directory.htaccess_path):
            return False
        if not os.path.isfile(self.directory.sentinel_path):
            return False
        return self._read(self.directory.htaccess_path) == rules

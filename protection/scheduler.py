import logging

from .reconciler import ReconcileStatus

logger = logging.getLogger(__name__)


class ProtectionScheduler:
    """
    Déclencheur périodique du reconciler. Appelé à chaque chargement de page
    d'administration ou par une tâche planifiée (commande
    `check_protection_files`) ; le TTL de l'état de vérification limite le
    travail réel à une passe par période.
    """

    def __init__(self, reconciler):
        self.reconciler = reconciler

    def tick(self):
        result = self.reconciler.reconcile(force=False)
        if result.status is ReconcileStatus.FAILED:
            logger.warning(f"Vérification des fichiers de protection en échec : {result.errors}")
        else:
            logger.debug(f"Vérification des fichiers de protection : {result.status.value}")
        return result

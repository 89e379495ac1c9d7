from django.core.management.base import BaseCommand, CommandError

from protection.reconciler import ReconcileStatus
from protection.service import ProtectionService


class Command(BaseCommand):
    help = "Vérifie et répare le .htaccess et le fichier sentinelle du dossier protégé (à planifier via cron)."

    def add_arguments(self, parser):
        parser.add_argument('--force', action='store_true', help="Ignore le délai entre deux vérifications")

    def handle(self, *args, force=False, **options):
        service = ProtectionService.from_settings()
        if force:
            result = service.reconcile(force=True)
        else:
            result = service.scheduler.tick()

        path = service.directory.path
        if result.status is ReconcileStatus.FAILED:
            raise CommandError(f"Protection incomplète pour {path} : {'; '.join(result.errors) or 'état non conforme'}")
        if result.status is ReconcileStatus.FRESH:
            self.stdout.write(f"Déjà vérifié récemment : {path}")
            return
        for name in result.written:
            self.stdout.write(self.style.SUCCESS(f"Écrit : {name}"))
        self.stdout.write(self.style.SUCCESS(f"Dossier protégé conforme : {path}"))

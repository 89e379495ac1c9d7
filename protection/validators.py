from .directory import ProtectedDirectory


def validate_protected_url(url, directory=None):
    """
    Lève une ValidationError si l'URL résolue d'un fichier ne passe pas par le
    dossier protégé. Point de contrôle final : un fichier choisi dans la
    médiathèque, déplacé à la main ou par un autre outil est refusé ici.
    """
    directory = directory or ProtectedDirectory.from_settings()
    directory.validate_url(url)

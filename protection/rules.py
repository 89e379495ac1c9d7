import re


def trailingslashit(url):
    """Retourne l'URL avec exactement un slash final."""
    return url.rstrip("/") + "/"


def deny_pattern(deny_extensions=()):
    """
    Motif de la RewriteRule :
    - aucune extension -> tout fichier du dossier (".*")
    - ["pdf"]          -> uniquement les fichiers se terminant par .pdf
    """
    extensions = [ext.strip().lstrip(".").lower() for ext in deny_extensions if ext and ext.strip()]
    if not extensions:
        return ".*"
    return r"\.(" + "|".join(re.escape(ext) for ext in extensions) + ")$"


def generate_rules(origin, deny_extensions=()):
    """
    Règles Apache (mod_rewrite) du dossier protégé.

    Refuse (403) toute requête dont le Referer ne commence pas par l'origine
    du site, sans tenir compte de la casse. Simple convention côté serveur :
    n'importe quel client peut forger un Referer, ce n'est pas une
    authentification.
    """
    rules = ""
    rules += "RewriteEngine On\n"
    rules += "RewriteCond %{HTTP_REFERER} !^" + trailingslashit(origin) + ".*$ [NC]\n"
    rules += "RewriteRule " + deny_pattern(deny_extensions) + " - [NC,L,F]\n"
    return rules

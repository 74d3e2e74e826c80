# packages/hifcore/src/hifcore/errors.py
"""Erreurs typées HIF.

Chaque erreur hérite aussi de l'exception standard la plus proche
(FileNotFoundError, ValueError, OSError) : un appelant qui ne connaît pas
HIF peut toujours les attraper de façon générique.
"""
from __future__ import annotations

__all__ = [
    "HifError",
    "InputNotFoundError",
    "DecodeFormatError",
    "MalformedColorError",
    "ReadFailureError",
    "WriteFailureError",
    "DeviceUnavailableError",
]


class HifError(Exception):
    """Racine de toutes les erreurs HIF."""


class InputNotFoundError(HifError, FileNotFoundError):
    """Chemin source absent ou illisible."""


class DecodeFormatError(HifError, ValueError):
    """Contenu non décodable : image source invalide, conteneur tronqué,
    longueur de flux incohérente avec width*height."""


class MalformedColorError(DecodeFormatError):
    """Jeton couleur invalide (sous-mode textuel HEX uniquement)."""


class ReadFailureError(HifError, OSError):
    """Source ouverte mais illisible en cours de flux (erreur disque, pipe rompu...)."""


class WriteFailureError(HifError, OSError):
    """Destination impossible à créer/écrire. Aucune garantie sur une sortie partielle."""


class DeviceUnavailableError(HifError, RuntimeError):
    """Device de calcul demandé mais indisponible (ex: cuda sans GPU)."""

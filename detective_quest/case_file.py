from __future__ import annotations

from typing import Dict, Optional, Sequence, Tuple


ENTRANCE = "Entrada"

# room -> (left exit, right exit)
MANSION_LAYOUT: Dict[str, Tuple[Optional[str], Optional[str]]] = {
    "Entrada": ("Salão", "Cozinha"),
    "Salão": ("Biblioteca", "Escritório"),
    "Cozinha": ("Quarto", "Varanda"),
    "Biblioteca": ("Sótão", None),
    "Escritório": (None, "Porão"),
    "Quarto": (None, None),
    "Varanda": (None, None),
    "Sótão": (None, None),
    "Porão": (None, None),
}

ROOM_CLUES: Dict[str, str] = {
    "Entrada": "Pegadas lamacentas",
    "Salão": "Vidro quebrado",
    "Cozinha": "Faca com impressões",
    "Biblioteca": "Livro deslocado",
    "Escritório": "Carta rasgada",
    "Quarto": "Frascos vazios",
    "Varanda": "Fibra vermelha",
    "Sótão": "Marcas de arraste",
    "Porão": "Pegada pequena",
}

CLUE_SUSPECTS: Sequence[Tuple[str, str]] = (
    ("Pegadas lamacentas", "Sr. Verde"),
    ("Vidro quebrado", "Sra. Rosa"),
    ("Faca com impressões", "Sr. Preto"),
    ("Livro deslocado", "Sra. Rosa"),
    ("Carta rasgada", "Sr. Preto"),
    ("Frascos vazios", "Dr. Azul"),
    ("Fibra vermelha", "Sra. Rosa"),
    ("Marcas de arraste", "Sr. Verde"),
    ("Pegada pequena", "Sra. Rosa"),
)


__all__ = ["ENTRANCE", "MANSION_LAYOUT", "ROOM_CLUES", "CLUE_SUSPECTS"]

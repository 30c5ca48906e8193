from __future__ import annotations

import random

import pytest

from detective_quest.clues import ClueDirectory
from detective_quest.ledger import ClueLedger, ClueNode, insert_clue, traverse_in_order
from detective_quest.suspect_index import SuspectIndex, djb2


# ------------------------------------------------------------
# ClueDirectory
# ------------------------------------------------------------

def test_directory_lookup(directory):
    assert directory.clue_for_room("Entrada") == "Pegadas lamacentas"
    assert directory.clue_for_room("Porão") == "Pegada pequena"
    assert directory.clue_for_room("Jardim") is None
    assert "Varanda" in directory
    assert len(directory) == 9


def test_directory_rejects_empty_clue():
    with pytest.raises(ValueError):
        ClueDirectory({"Sala": ""})


def test_directory_from_pairs():
    d = ClueDirectory.from_pairs([("Sala", "Chave")])
    assert "Sala" in d
    assert d.clue_for_room("Sala") == "Chave"


# ------------------------------------------------------------
# ClueLedger
# ------------------------------------------------------------

def _bst_ok(node, lo=None, hi=None) -> bool:
    if node is None:
        return True
    if lo is not None and not node.clue > lo:
        return False
    if hi is not None and not node.clue < hi:
        return False
    return _bst_ok(node.left, lo, node.clue) and _bst_ok(node.right, node.clue, hi)


def test_insert_same_clue_twice_keeps_one_node():
    root = insert_clue(None, "Vidro quebrado")
    again = insert_clue(root, "Vidro quebrado")
    assert again is root
    assert root.left is None and root.right is None
    assert traverse_in_order(again) == ["Vidro quebrado"]


def test_insert_none_is_noop():
    assert insert_clue(None, None) is None
    root = ClueNode("a")
    assert insert_clue(root, None) is root


def test_ledger_add_reports_new_clues():
    ledger = ClueLedger()
    assert ledger.add("Fibra vermelha") is True
    assert ledger.add("Fibra vermelha") is False
    assert ledger.add("Carta rasgada") is True
    assert len(ledger) == 2
    assert "Carta rasgada" in ledger
    assert "carta rasgada" not in ledger
    assert list(ledger) == ["Carta rasgada", "Fibra vermelha"]


def test_in_order_traversal_is_sorted_for_random_insertions():
    rng = random.Random(7)
    words = [f"pista {rng.randint(0, 40):02d}" for _ in range(120)]
    ledger = ClueLedger()
    for word in words:
        before = len(ledger.clues())
        ledger.add(word)
        after = ledger.clues()
        assert len(after) - before in (0, 1)
        assert after == sorted(after)
        assert _bst_ok(ledger.root)
    assert ledger.clues() == sorted(set(words))
    assert len(ledger) == len(set(words))


def test_codepoint_order_with_accents():
    ledger = ClueLedger()
    for clue in ["Óculos", "Pegadas lamacentas", "Faca com impressões", "Anel"]:
        ledger.add(clue)
    assert ledger.clues() == ["Anel", "Faca com impressões", "Pegadas lamacentas", "Óculos"]


def test_clear_empties_ledger():
    ledger = ClueLedger()
    ledger.add("x")
    ledger.clear()
    assert not ledger
    assert len(ledger) == 0
    assert ledger.clues() == []


# ------------------------------------------------------------
# SuspectIndex
# ------------------------------------------------------------

def test_djb2_known_values():
    assert djb2("") == 5381
    assert djb2("a") == 5381 * 33 + ord("a")


def test_lookup_builtin_table(suspect_index):
    assert suspect_index.lookup("Vidro quebrado") == "Sra. Rosa"
    assert suspect_index.lookup("Frascos vazios") == "Dr. Azul"
    assert suspect_index.lookup("Pegada inexistente") is None
    assert len(suspect_index) == 9


def test_insert_or_update_last_write_wins():
    index = SuspectIndex()
    index.insert_or_update("Carta rasgada", "Sr. Preto")
    index.insert_or_update("Carta rasgada", "Sra. Rosa")
    assert index.lookup("Carta rasgada") == "Sra. Rosa"
    assert len(index) == 1
    assert [c for c, _ in index.items()].count("Carta rasgada") == 1


def test_collisions_still_compare_full_text():
    # a single bucket forces every key into the same chain
    index = SuspectIndex(bucket_count=1)
    index.insert_or_update("Vidro quebrado", "Sra. Rosa")
    index.insert_or_update("Livro deslocado", "Sr. Verde")
    index.insert_or_update("Vidro quebrado", "Dr. Azul")
    assert index.lookup("Vidro quebrado") == "Dr. Azul"
    assert index.lookup("Livro deslocado") == "Sr. Verde"
    assert index.lookup("Vidro") is None
    assert len(index) == 2
    assert sorted(index.items()) == [("Livro deslocado", "Sr. Verde"), ("Vidro quebrado", "Dr. Azul")]


def test_bucket_count_must_be_positive():
    with pytest.raises(ValueError):
        SuspectIndex(bucket_count=0)


def test_clear_index(suspect_index):
    suspect_index.clear()
    assert len(suspect_index) == 0
    assert suspect_index.lookup("Vidro quebrado") is None


def test_ledger_add_descends_once(monkeypatch):
    import detective_quest.ledger as ledger_mod

    def no_separate_search(*args, **kwargs):
        raise AssertionError("add() should not search before inserting")

    monkeypatch.setattr(ledger_mod, "contains_clue", no_separate_search)
    ledger = ClueLedger()
    assert ledger.add("Vidro quebrado") is True
    assert ledger.add("Carta rasgada") is True
    assert ledger.add("Vidro quebrado") is False
    assert len(ledger) == 2
    assert ledger.clues() == ["Carta rasgada", "Vidro quebrado"]

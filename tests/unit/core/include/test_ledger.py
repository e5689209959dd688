from __future__ import annotations

from singleinclude.core.include.ledger import InclusionLedger


def test_ledger_grows_and_deduplicates():
    ledger = InclusionLedger()
    ledger.add("/b.h")
    ledger.add("/a.h")
    ledger.add("/b.h")

    assert len(ledger) == 2
    assert "/a.h" in ledger
    assert "/c.h" not in ledger


def test_ledger_iterates_sorted():
    ledger = InclusionLedger()
    for p in ("/z.h", "/a.h", "/m.h"):
        ledger.add(p)

    assert list(ledger) == ["/a.h", "/m.h", "/z.h"]

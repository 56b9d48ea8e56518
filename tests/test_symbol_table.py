import pytest

from symlex.symbol_table import (
    ScopeTable,
    SymbolInfo,
    SymbolTable,
    bounded_sdbm_hash,
    sdbm_hash,
)


def test_sdbm_hash_empty_and_single_char():
    assert sdbm_hash("") == 0
    assert sdbm_hash("a") == ord("a")
    assert sdbm_hash("Z") == ord("Z")


def test_sdbm_hash_fits_64_bits_for_long_names():
    value = sdbm_hash("a_very_long_identifier_name_that_overflows")
    assert 0 <= value < 2**64


@pytest.mark.parametrize("name", ["a", "ab", "xyz", "i", "foo", "Q1"])
@pytest.mark.parametrize("buckets", [1, 3, 7, 10])
def test_bounded_hash_agrees_with_full_hash_for_short_names(name, buckets):
    assert bounded_sdbm_hash(name, buckets) == sdbm_hash(name) % buckets


@pytest.mark.parametrize("name", ["identifier", "é", "longer_name_here", ""])
def test_bounded_hash_in_range(name):
    assert 0 <= bounded_sdbm_hash(name, 7) < 7


def test_bounded_hash_rejects_nonpositive_buckets():
    with pytest.raises(ValueError):
        bounded_sdbm_hash("a", 0)


def test_scope_table_rejects_nonpositive_buckets():
    with pytest.raises(ValueError):
        ScopeTable(0)
    with pytest.raises(ValueError):
        SymbolTable(-1)


def test_insert_and_find():
    scope = ScopeTable(7)
    assert scope.insert("foo", "FUNCTION") is True
    assert scope.find("foo") == SymbolInfo("foo", "FUNCTION")
    assert scope.find("bar") is None
    assert "foo" in scope
    assert len(scope) == 1


def test_duplicate_insert_refused():
    scope = ScopeTable(7)
    assert scope.insert("x", "ID")
    assert scope.insert("x", "NUMBER") is False
    assert scope.find("x").type_ == "ID"


def test_chain_positions_in_single_bucket():
    scope = ScopeTable(1)
    for name in ["a", "b", "c"]:
        scope.insert(name, "ID")
    assert scope.location_of("a") == (1, 1)
    assert scope.location_of("b") == (1, 2)
    assert scope.location_of("c") == (1, 3)
    assert scope.location_of("d") is None


def test_erase_shifts_chain():
    scope = ScopeTable(1)
    for name in ["a", "b", "c"]:
        scope.insert(name, "ID")
    assert scope.erase("b") is True
    assert scope.erase("b") is False
    assert scope.location_of("c") == (1, 2)
    assert [s.name for s in scope] == ["a", "c"]


@pytest.mark.parametrize("bounded", [False, True])
def test_location_bucket_matches_hash(bounded):
    scope = ScopeTable(7, bounded_hash=bounded)
    scope.insert("abc", "ID")
    expected = (bounded_sdbm_hash("abc", 7) if bounded else sdbm_hash("abc") % 7) + 1
    assert scope.location_of("abc") == (expected, 1)


def test_format_single_bucket():
    scope = ScopeTable(1)
    scope.insert("a", "ID")
    scope.insert("b", "NUMBER")
    assert scope.format() == "\tScopeTable# 1\n\t1--> <a,ID> <b,NUMBER> \n"


def test_format_skip_empty():
    scope = ScopeTable(5)
    assert scope.format() .count("-->") == 5
    assert scope.format(skip_empty=True) == "\tScopeTable# 1\n"
    scope.insert("k", "ID")
    bucket, _ = scope.location_of("k")
    assert scope.format(skip_empty=True) == f"\tScopeTable# 1\n\t{bucket}--> <k,ID> \n"


def test_scope_ids_increase_monotonically():
    table = SymbolTable(7)
    assert table.current_scope.id == 1
    assert table.enter_scope() is True
    assert table.current_scope.id == 2
    assert table.enter_scope() is True
    assert table.current_scope.id == 3
    assert table.exit_scope() is True
    assert table.enter_scope() is True
    assert table.current_scope.id == 4
    assert [scope.id for scope in table] == [4, 2, 1]


def test_lookup_searches_outward_and_shadows():
    table = SymbolTable(7)
    table.insert("x", "OUTER")
    table.enter_scope()
    assert table.find("x").type_ == "OUTER"
    assert table.scope_id_of("x") == 1
    table.insert("x", "INNER")
    assert table.find("x").type_ == "INNER"
    assert table.scope_id_of("x") == 2
    table.exit_scope()
    assert table.find("x").type_ == "OUTER"


def test_missing_symbol_lookup():
    table = SymbolTable(7)
    assert table.find("nope") is None
    assert table.scope_id_of("nope") is None
    assert table.location_of("nope") is None


def test_erase_only_in_current_scope():
    table = SymbolTable(7)
    table.insert("x", "ID")
    table.enter_scope()
    assert table.erase("x") is False
    table.exit_scope()
    assert table.erase("x") is True
    assert table.find("x") is None


def test_location_of_from_inner_scope():
    table = SymbolTable(1)
    table.insert("a", "ID")
    table.insert("b", "ID")
    table.enter_scope()
    table.insert("c", "ID")
    assert table.location_of("b") == (1, 2)
    assert table.location_of("c") == (1, 1)


def test_exit_all_scopes_then_recover():
    table = SymbolTable(7)
    table.enter_scope()
    assert table.exit_scope() is True
    assert table.exit_scope() is True
    assert table.current_scope is None
    assert table.exit_scope() is False
    assert table.erase("x") is False
    assert table.format_current() == ""
    assert table.format_all() == ""
    assert table.insert("x", "ID") is True
    assert table.current_scope.id == 1
    assert table.find("x") == SymbolInfo("x", "ID")


def test_enter_scope_without_parent_returns_false():
    table = SymbolTable(7)
    table.exit_scope()
    assert table.enter_scope() is False
    assert table.current_scope.id == 1
    assert table.enter_scope() is True
    assert table.current_scope.id == 2


def test_format_all_orders_inner_first():
    table = SymbolTable(1)
    table.insert("a", "ID")
    table.enter_scope()
    table.insert("b", "ID")
    assert table.format_all() == (
        "\tScopeTable# 2\n\t1--> <b,ID> \n\tScopeTable# 1\n\t1--> <a,ID> \n"
    )
    assert table.format_current() == "\tScopeTable# 2\n\t1--> <b,ID> \n"


def test_format_all_skip_empty_passes_through():
    table = SymbolTable(3)
    table.enter_scope()
    assert table.format_all(skip_empty=True) == "\tScopeTable# 2\n\tScopeTable# 1\n"
"""
Unit tests for the Topic Catalog and its sample content.

Tests cover:
- Structural invariants over every topic/example/step
- Menu ordering and lookups
- The worked examples' derived result tables
"""

import pytest
from pydantic import ValidationError

from sqlviz.catalog import Catalog, Example, Row, Step, Table, Topic, row, table
from sqlviz.topics import CUSTOMERS, EMPLOYEES, ORDERS, SQL_TOPICS


def _all_steps():
    for topic_name, topic in SQL_TOPICS.topics.items():
        for example in topic.examples:
            for step in example.steps:
                yield topic_name, example.title, step


class TestCatalogInvariants:
    """Properties that must hold for every entry in the catalog."""

    def test_every_example_has_steps(self):
        for topic_name, topic in SQL_TOPICS.topics.items():
            assert topic.examples, topic_name
            for example in topic.examples:
                assert len(example.steps) >= 1, f"{topic_name} / {example.title}"

    def test_rows_only_use_declared_columns(self):
        for topic_name, title, step in _all_steps():
            for t in step.tables:
                if t.columns is None:
                    continue
                for r in t.rows:
                    extra = set(r.keys()) - set(t.columns)
                    assert not extra, f"{topic_name} / {title} / {t.name}: {extra}"

    def test_topics_carry_descriptions(self):
        for topic in SQL_TOPICS.topics.values():
            assert topic.description
            assert topic.syntax
            assert topic.use_case

    def test_catalog_is_frozen(self):
        with pytest.raises(ValidationError):
            CUSTOMERS.name = "Clients"


class TestCatalogLookups:

    def test_menu_order(self):
        assert SQL_TOPICS.topic_names() == [
            "SELECT", "WHERE", "INNER JOIN", "LEFT JOIN", "RIGHT JOIN",
            "FULL OUTER JOIN", "GROUP BY", "ORDER BY", "UNION", "Subquery",
            "CTE", "Window Functions", "DML (Data Manipulation)", "DDL (Data Definition)",
        ]

    def test_example_titles(self):
        assert SQL_TOPICS.example_titles("WHERE") == [
            "Filter with a string value",
            "Filter with a numeric value",
        ]

    def test_unknown_topic(self):
        with pytest.raises(KeyError):
            SQL_TOPICS.topic("HAVING")

    def test_example_out_of_range(self):
        with pytest.raises(IndexError):
            SQL_TOPICS.example("WHERE", 2)
        with pytest.raises(IndexError):
            SQL_TOPICS.example("WHERE", -1)

    def test_small_catalog(self):
        t = table("T", ["A"], [row(A=1)])
        cat = Catalog(topics={
            "Only": Topic(description="d", syntax="s", use_case="u", examples=(
                Example(title="one", steps=(Step(explanation="e", query="q", tables=(t,)),)),
            )),
        })
        assert cat.topic_names() == ["Only"]
        assert cat.example("Only", 0).steps[0].tables[0].rows[0].get("A") == 1


class TestRowHelpers:

    def test_missing_column_is_none(self):
        assert row(A=1).get("B") is None

    def test_flagged_returns_copy(self):
        original = row(A=1)
        marked = original.flagged(highlight=True)
        assert marked.highlight is True
        assert original.highlight is False
        assert marked.get("A") == 1

    def test_project_with_rename(self):
        r = row(CustomerID=1, Name="Alice", Country="USA", highlight=True)
        projected = r.project("Country", CustomerName="Name")
        assert projected.values == {"Country": "USA", "CustomerName": "Alice"}
        assert projected.highlight is False

    def test_table_without_columns(self):
        t = Table(name="T", rows=(Row(values={"x": 1}),))
        assert t.columns is None


class TestWorkedExamples:
    """Spot checks of the derived result tables."""

    def test_where_numeric_filter(self):
        example = SQL_TOPICS.example("WHERE", 1)
        assert example.title == "Filter with a numeric value"
        assert len(example.steps) == 2

        base = example.steps[0].tables
        assert len(base) == 1
        assert base[0].name == "Orders"
        assert len(base[0].rows) == 5

        result = example.steps[1].tables[0]
        assert result.name == "Result"
        assert result.columns == ORDERS.columns
        assert [r.get("OrderID") for r in result.rows] == [101, 104]
        assert all(r.get("Amount") > 100 for r in result.rows)
        assert all(r.highlight for r in result.rows)

    def test_where_string_filter(self):
        result = SQL_TOPICS.example("WHERE", 0).steps[1].tables[0]
        assert [r.get("Name") for r in result.rows] == ["Alice", "Charlie"]

    def test_left_join_unmatched_customer(self):
        base, result = SQL_TOPICS.example("LEFT JOIN", 0).steps
        customers = base.tables[0]
        diana = [r for r in customers.rows if r.get("Name") == "Diana"][0]
        assert diana.unmatched and not diana.highlight
        last = result.tables[0].rows[-1]
        assert last.get("Name") == "Diana"
        assert last.get("Product") is None
        assert last.unmatched

    def test_full_outer_join_has_both_unmatched_sides(self):
        rows = SQL_TOPICS.example("FULL OUTER JOIN", 0).steps[1].tables[0].rows
        unmatched = [(r.get("Name"), r.get("Product")) for r in rows if r.unmatched]
        assert unmatched == [("Diana", None), (None, "Webcam")]

    def test_group_by_groups(self):
        grouping = SQL_TOPICS.example("GROUP BY", 1).steps[1]
        assert [t.name for t in grouping.tables] == [
            "Group: CustomerID 1", "Group: CustomerID 2",
            "Group: CustomerID 3", "Group: CustomerID 5",
        ]
        assert [len(t.rows) for t in grouping.tables] == [2, 1, 1, 1]

    def test_order_by_multiple_columns(self):
        result = SQL_TOPICS.example("ORDER BY", 2).steps[0].tables[0]
        assert [r.get("Name") for r in result.rows] == [
            "Ivan", "Heidi", "Judy", "Mallory", "Grace", "Frank",
        ]

    def test_order_by_desc(self):
        result = SQL_TOPICS.example("ORDER BY", 1).steps[0].tables[0]
        assert [r.get("Name") for r in result.rows] == ["Diana", "Charlie", "Bob", "Alice"]

    def test_union_removes_duplicates_and_sorts(self):
        result = SQL_TOPICS.example("UNION", 0).steps[1].tables[0]
        names = [r.get("Name") for r in result.rows]
        assert names == sorted(set(names))
        assert len(names) == len(CUSTOMERS.rows) + len(EMPLOYEES.rows)

    def test_subquery_id_list(self):
        steps = SQL_TOPICS.example("Subquery", 0).steps
        assert [r.get("CustomerID") for r in steps[1].tables[0].rows] == [1, 2, 3, 5]
        assert "IN (1, 2, 3, 5)" in steps[2].query
        assert [r.get("CustomerID") for r in steps[3].tables[0].rows] == [1, 2, 3]

    def test_rank_ties_share_rank(self):
        result = SQL_TOPICS.example("Window Functions", 0).steps[2].tables[0]
        ranks = {r.get("Name"): r.get("DeptRank") for r in result.rows}
        assert ranks["Frank"] == ranks["Grace"] == 2

    def test_update_marks_changed_cell(self):
        result = SQL_TOPICS.example("DML (Data Manipulation)", 1).steps[1].tables[0]
        changed = [r for r in result.rows if r.updated]
        assert len(changed) == 1
        assert changed[0].get("Country") == "Germany"
        assert changed[0].updated_cells == frozenset({"Country"})
        # base table untouched
        assert CUSTOMERS.rows[3].get("Country") == "UK"

    def test_insert_marks_new_row(self):
        result = SQL_TOPICS.example("DML (Data Manipulation)", 0).steps[1].tables[0]
        assert result.rows[-1].inserted
        assert result.rows[-1].get("Name") == "Eve"

    def test_create_table_is_empty(self):
        created = SQL_TOPICS.example("DDL (Data Definition)", 0).steps[0].tables[0]
        assert created.rows == ()
        assert created.columns == ("ProductID", "Name", "Price")

    def test_alter_adds_null_column(self):
        result = SQL_TOPICS.example("DDL (Data Definition)", 1).steps[1].tables[0]
        assert result.columns[-1] == "Email"
        assert all(r.get("Email") is None for r in result.rows)

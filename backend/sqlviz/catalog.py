"""
Topic Catalog — immutable records for SQL topics, their worked examples,
and the ordered steps (explanation + query + result tables) of each example.
"""

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


CellValue = Union[str, int, float, None]


class Row(BaseModel):
    """One table row: column values plus visual annotation flags."""

    model_config = ConfigDict(frozen=True)

    values: dict[str, CellValue] = Field(default_factory=dict)
    highlight: bool = False
    unmatched: bool = False
    inserted: bool = False
    updated: bool = False
    updated_cells: frozenset[str] = frozenset()

    def get(self, column: str) -> CellValue:
        # A missing column is "undefined" and renders the same as None.
        return self.values.get(column)

    def keys(self) -> list[str]:
        return list(self.values)

    def flagged(self, **flags: Any) -> "Row":
        return self.model_copy(update=flags)

    def project(self, *columns: str, **renames: str) -> "Row":
        """Keep only ``columns`` (and ``renames`` as new_name=old_name); flags are dropped."""
        values = {c: self.values.get(c) for c in columns}
        values.update({new: self.values.get(old) for new, old in renames.items()})
        return Row(values=values)


class Table(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = ""
    columns: Optional[tuple[str, ...]] = None
    rows: tuple[Row, ...] = ()

    def renamed(self, name: str) -> "Table":
        return self.model_copy(update={"name": name})

    def with_rows(self, rows) -> "Table":
        return self.model_copy(update={"rows": tuple(rows)})


class Step(BaseModel):
    model_config = ConfigDict(frozen=True)

    explanation: str
    query: str
    tables: tuple[Table, ...] = ()


class Example(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    steps: tuple[Step, ...]


class Topic(BaseModel):
    model_config = ConfigDict(frozen=True)

    description: str
    syntax: str
    use_case: str
    examples: tuple[Example, ...]


class Catalog(BaseModel):
    """Ordered mapping of topic name → Topic. Insertion order is menu order."""

    model_config = ConfigDict(frozen=True)

    topics: dict[str, Topic]

    def topic_names(self) -> list[str]:
        return list(self.topics)

    def topic(self, name: str) -> Topic:
        return self.topics[name]

    def example_titles(self, name: str) -> list[str]:
        return [ex.title for ex in self.topics[name].examples]

    def example(self, name: str, index: int) -> Example:
        examples = self.topics[name].examples
        if not 0 <= index < len(examples):
            raise IndexError(f"example index {index} out of range for topic {name!r}")
        return examples[index]


def row(highlight: bool = False, unmatched: bool = False, **values: CellValue) -> Row:
    """Shorthand for authoring literal rows: ``row(Name="Alice", highlight=True)``."""
    return Row(values=values, highlight=highlight, unmatched=unmatched)


def table(name: str, columns, rows) -> Table:
    return Table(name=name, columns=tuple(columns) if columns is not None else None, rows=tuple(rows))

"""Rule tree model: an arena of nested blocks holding declarations."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

# Parent index used for blocks and declarations that sit at stylesheet level.
ROOT = -1


@dataclass(frozen=True)
class Declaration:
    """A single ``prop: value`` pair written directly inside one block."""

    prop: str
    value: str
    parent: int = ROOT
    important: bool = False
    line: int | None = None
    column: int | None = None


@dataclass(frozen=True)
class BlockRef:
    """A child entry pointing at a nested block in the arena."""

    index: int


Child = Declaration | BlockRef


@dataclass
class StyleRule:
    """A selector with a body of declarations and nested blocks."""

    index: int
    selector: str
    parent: int = ROOT
    children: list[Child] = field(default_factory=list)
    line: int | None = None
    column: int | None = None


@dataclass
class AtRule:
    """An ``@name params`` statement, with a body when written as a block."""

    index: int
    name: str
    params: str = ""
    parent: int = ROOT
    children: list[Child] | None = None
    line: int | None = None
    column: int | None = None

    @property
    def has_block(self) -> bool:
        return self.children is not None


Block = StyleRule | AtRule


@dataclass
class RuleTree:
    """The parsed stylesheet.

    Blocks live in ``blocks`` and are addressed by index. Each block records
    the index of its lexical parent (``ROOT`` for top-level blocks), so
    upward walks never need back-pointers.
    """

    blocks: list[Block] = field(default_factory=list)
    children: list[Child] = field(default_factory=list)
    source: str | None = None

    # --- construction -------------------------------------------------------

    def add_rule(
        self,
        selector: str,
        parent: int = ROOT,
        line: int | None = None,
        column: int | None = None,
    ) -> StyleRule:
        """Append a style rule under *parent* and return it."""
        rule = StyleRule(
            index=len(self.blocks), selector=selector, parent=parent, line=line, column=column
        )
        self._attach(rule, parent)
        return rule

    def add_at_rule(
        self,
        name: str,
        params: str = "",
        parent: int = ROOT,
        has_block: bool = True,
        line: int | None = None,
        column: int | None = None,
    ) -> AtRule:
        """Append an at-rule under *parent* and return it."""
        at_rule = AtRule(
            index=len(self.blocks),
            name=name,
            params=params,
            parent=parent,
            children=[] if has_block else None,
            line=line,
            column=column,
        )
        self._attach(at_rule, parent)
        return at_rule

    def add_declaration(
        self,
        prop: str,
        value: str,
        parent: int = ROOT,
        important: bool = False,
        line: int | None = None,
        column: int | None = None,
    ) -> Declaration:
        """Append a declaration to the body of *parent* and return it."""
        decl = Declaration(
            prop=prop, value=value, parent=parent, important=important, line=line, column=column
        )
        self._body(parent).append(decl)
        return decl

    def _attach(self, block: Block, parent: int) -> None:
        body = self._body(parent)
        self.blocks.append(block)
        body.append(BlockRef(block.index))

    def _body(self, index: int) -> list[Child]:
        children = self.children_of(index)
        if children is None:
            raise ValueError(f"Block {index} is a statement at-rule and has no body")
        return children

    # --- lookup -------------------------------------------------------------

    def block(self, index: int) -> Block:
        """Return the block stored at *index*."""
        if index < 0 or index >= len(self.blocks):
            raise IndexError(f"No block at index {index}")
        return self.blocks[index]

    def children_of(self, index: int) -> list[Child] | None:
        """Return the body of *index*, or the root body for ``ROOT``."""
        if index == ROOT:
            return self.children
        return self.block(index).children

    def parent_of(self, index: int) -> Block | None:
        """Return the enclosing block, or None at stylesheet level."""
        parent = self.block(index).parent
        if parent == ROOT:
            return None
        return self.blocks[parent]

    # --- traversal ----------------------------------------------------------

    def walk(self, index: int = ROOT) -> Iterator[Block]:
        """Yield every block below *index* in pre-order."""
        for child in self.children_of(index) or ():
            if isinstance(child, BlockRef):
                block = self.blocks[child.index]
                yield block
                yield from self.walk(block.index)

    def rules(self) -> Iterator[StyleRule]:
        """Yield every style rule in the stylesheet in pre-order."""
        for block in self.walk():
            if isinstance(block, StyleRule):
                yield block

    def walk_declarations(self, index: int = ROOT) -> Iterator[Declaration]:
        """Yield every declaration below *index*, nested blocks included."""
        for child in self.children_of(index) or ():
            if isinstance(child, Declaration):
                yield child
            elif isinstance(child, BlockRef):
                yield from self.walk_declarations(child.index)

    def nested_rules(self, index: int) -> Iterator[StyleRule]:
        """Yield the style rules written directly in the body of *index*."""
        for child in self.children_of(index) or ():
            if isinstance(child, BlockRef):
                block = self.blocks[child.index]
                if isinstance(block, StyleRule):
                    yield block

    def full_selector(self, index: int) -> str:
        """Join the selectors from the outermost enclosing rule down to *index*.

        Stops at the first ancestor that is not a style rule (an at-rule).
        """
        selectors: list[str] = []
        current: int = index
        while current != ROOT:
            block = self.blocks[current]
            if not isinstance(block, StyleRule):
                break
            selectors.insert(0, block.selector)
            current = block.parent
        return " ".join(selectors)

    def depth(self, index: int) -> int:
        """Number of enclosing blocks above *index*."""
        depth = 0
        current = self.block(index).parent
        while current != ROOT:
            depth += 1
            current = self.blocks[current].parent
        return depth

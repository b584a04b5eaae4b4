"""Visitor pattern for syntax tree traversal.

Lets downstream consumers (evaluators, linters, the serializer) walk a tree
without adding methods to the node classes.

NOTE: This module follows Python stdlib ast.NodeVisitor naming convention.
Methods are named visit_NodeName (PascalCase) rather than visit_node_name
(snake_case), matching the node class names.

Python 3.13+.
"""

from collections.abc import Callable, Iterator
from dataclasses import Field, fields
from typing import ClassVar

from purelex.core.depth_guard import DepthGuard, traversal_depth_limit

from .ast import Span, SyntaxNode

__all__ = ["ASTVisitor"]


class ASTVisitor[T = SyntaxNode]:
    """Base visitor for traversing syntax trees.

    Follows stdlib ast.NodeVisitor convention: generic_visit() automatically
    traverses all child nodes. Override visit_NodeType methods to add custom
    behavior.

    Dispatch:
    - Method names are collected once per class via __init_subclass__
    - Bound methods are cached per instance on first use

    Example:
        >>> class CountCalls(ASTVisitor):
        ...     def __init__(self):
        ...         super().__init__()
        ...         self.count = 0
        ...
        ...     def visit_Call(self, node: Call) -> SyntaxNode:
        ...         self.count += 1
        ...         return self.generic_visit(node)
        ...
        >>> visitor = CountCalls()
        >>> visitor.visit(program)
        >>> visitor.count
        2
    """

    __slots__ = ("_depth_guard", "_instance_dispatch_cache")

    _class_visit_methods: ClassVar[dict[str, str]] = {}

    _fields_cache: ClassVar[dict[type, tuple[Field[object], ...]]] = {}

    def __init_subclass__(cls, **kwargs: object) -> None:
        """Build class-level dispatch table when subclass is defined."""
        super().__init_subclass__(**kwargs)
        cls._class_visit_methods = {}
        for name in dir(cls):
            if name.startswith("visit_") and name != "visit":
                cls._class_visit_methods[name[6:]] = name

    def __init__(self, *, max_depth: int | None = None) -> None:
        """Initialize visitor with depth guard and dispatch cache.

        Subclasses MUST call super().__init__().

        Args:
            max_depth: Maximum traversal depth (default: derived from the
                interpreter recursion limit, see traversal_depth_limit).
        """
        effective_max_depth = max_depth if max_depth is not None else traversal_depth_limit()
        self._depth_guard = DepthGuard(max_depth=effective_max_depth)
        self._instance_dispatch_cache: dict[type, Callable[[SyntaxNode], T]] = {}

    def _resolve(self, node_type: type) -> Callable[[SyntaxNode], T]:
        if node_type not in self._instance_dispatch_cache:
            method_name = self._class_visit_methods.get(node_type.__name__)
            method = getattr(self, method_name) if method_name else self.generic_visit
            self._instance_dispatch_cache[node_type] = method
        return self._instance_dispatch_cache[node_type]

    def visit(self, node: SyntaxNode) -> T:
        """Dispatch to visit_<NodeType>, or generic_visit if undefined."""
        return self._resolve(type(node))(node)

    def _get_node_fields(self, node_type: type) -> tuple[Field[object], ...]:
        """Dataclass fields of node_type, introspected once per type."""
        if node_type not in ASTVisitor._fields_cache:
            ASTVisitor._fields_cache[node_type] = tuple(
                item for item in fields(node_type) if item.name != "span"
            )
        return ASTVisitor._fields_cache[node_type]

    def _children(self, node: SyntaxNode) -> Iterator[SyntaxNode]:
        """Child nodes of node in field order."""
        for field in self._get_node_fields(type(node)):
            value = getattr(node, field.name)

            # Operators are StrEnum members, so str covers them too
            if value is None or isinstance(value, (str, int, bool, Span)):
                continue

            if isinstance(value, tuple):
                for item in value:
                    if hasattr(item, "__dataclass_fields__"):
                        yield item
            elif hasattr(value, "__dataclass_fields__"):
                yield value

    def generic_visit(self, node: SyntaxNode) -> T:
        """Visit every descendant in source order, then return node itself.

        Descendants without a visit_<NodeType> method are walked with an
        explicit stack, so long operator and call chains cost no recursion.
        Only nodes handled by a visit_ method (which usually call
        generic_visit again) count against max_depth.

        Depth Protection:
            The default limit covers every tree the parser can return.
            Hand-built trees nested deeper through visit_ methods raise
            DepthLimitExceededError instead of RecursionError.

        Raises:
            DepthLimitExceededError: If traversal depth exceeds max_depth
        """
        with self._depth_guard:
            pending = [self._children(node)]
            while pending:
                child = next(pending[-1], None)
                if child is None:
                    pending.pop()
                    continue
                method = self._resolve(type(child))
                if getattr(method, "__func__", None) is ASTVisitor.generic_visit:
                    pending.append(self._children(child))
                else:
                    method(child)

        return node  # type: ignore[return-value]  # T defaults to SyntaxNode

"""
Utility to extract readable answer source from live Python objects.

The catalogue renders each answer from its real implementation rather than
from a copy kept in a template. This module reads that source with `inspect`
and cleans it with `libcst`:

1.  The `@answer(...)` registration decorator is removed.
2.  Docstrings can optionally be stripped for a compact listing.
3.  Module-level helpers the answer depends on (e.g. `_spawn`, a private base
    class) are resolved and emitted before the answer, so every listing reads
    as a self-contained snippet.
"""

import inspect
import sys
import textwrap
from typing import Any, Callable, Iterable, List, Optional, Set, Union

import libcst as cst

DEFAULT_DECORATORS = ("answer", "register_answer")

DefNode = Union[cst.FunctionDef, cst.ClassDef]


def _decorator_name(node: cst.Decorator) -> Optional[str]:
  """Returns the last dotted component of a decorator expression."""
  expr = node.decorator
  if isinstance(expr, cst.Call):
    expr = expr.func
  if isinstance(expr, cst.Name):
    return expr.value
  if isinstance(expr, cst.Attribute):
    return expr.attr.value
  return None


def _is_docstring(stmt: cst.BaseStatement) -> bool:
  if not isinstance(stmt, cst.SimpleStatementLine) or len(stmt.body) != 1:
    return False
  expr = stmt.body[0]
  return isinstance(expr, cst.Expr) and isinstance(expr.value, (cst.SimpleString, cst.ConcatenatedString))


class _AnswerCleaner(cst.CSTTransformer):
  """
  Removes registration decorators and, optionally, docstrings.
  """

  def __init__(self, decorator_names: Iterable[str], strip_docstrings: bool) -> None:
    super().__init__()
    self.decorator_names = set(decorator_names)
    self.strip_docstrings = strip_docstrings

  def leave_Decorator(
    self, original_node: cst.Decorator, updated_node: cst.Decorator
  ) -> Union[cst.Decorator, cst.RemovalSentinel]:
    if _decorator_name(original_node) in self.decorator_names:
      return cst.RemoveFromParent()
    return updated_node

  def leave_FunctionDef(self, original_node: cst.FunctionDef, updated_node: cst.FunctionDef) -> cst.FunctionDef:
    return self._drop_docstring(updated_node)

  def leave_ClassDef(self, original_node: cst.ClassDef, updated_node: cst.ClassDef) -> cst.ClassDef:
    return self._drop_docstring(updated_node)

  def _drop_docstring(self, node: DefNode) -> DefNode:
    if not self.strip_docstrings or not isinstance(node.body, cst.IndentedBlock):
      return node

    stmts = list(node.body.body)
    if not stmts or not _is_docstring(stmts[0]):
      return node

    remainder = stmts[1:]
    if remainder:
      remainder[0] = remainder[0].with_changes(leading_lines=())
    else:
      remainder = [cst.SimpleStatementLine(body=[cst.Pass()])]
    return node.with_changes(body=node.body.with_changes(body=remainder))


class _NameCollector(cst.CSTVisitor):
  """
  Collects bare names referenced by a definition, in order of appearance.

  Attribute names (`self._lock`) are skipped; only the object part of an
  attribute access is visited.
  """

  def __init__(self) -> None:
    super().__init__()
    self.names: List[str] = []

  def visit_Name(self, node: cst.Name) -> None:
    if node.value not in self.names:
      self.names.append(node.value)

  def visit_Attribute(self, node: cst.Attribute) -> bool:
    node.value.visit(self)
    return False


class AnswerSourceExtractor:
  """
  Extracts cleaned, self-contained source code for a function or class.

  Attributes:
      strip_docstrings (bool): Remove docstrings from every emitted definition.
      include_helpers (bool): Emit same-module helper definitions first.
      skip (Callable[[Any], bool]): Predicate for helpers that must not be
          inlined (e.g. objects that are answers in their own right).
  """

  def __init__(
    self,
    strip_docstrings: bool = False,
    include_helpers: bool = True,
    skip: Optional[Callable[[Any], bool]] = None,
    decorator_names: Iterable[str] = DEFAULT_DECORATORS,
  ) -> None:
    self.strip_docstrings = strip_docstrings
    self.include_helpers = include_helpers
    self.skip = skip or (lambda obj: False)
    self.decorator_names = tuple(decorator_names)

  @staticmethod
  def raw_source(obj: Any) -> str:
    """
    Reads the dedented source of a function or class.

    Raises:
        TypeError: If `obj` is neither a function nor a class.
        OSError: If the source cannot be retrieved.
    """
    if not (inspect.isfunction(obj) or inspect.isclass(obj)):
      raise TypeError(f"Expected a function or class, got {type(obj)}")
    try:
      source = inspect.getsource(obj)
    except OSError as e:
      raise OSError(f"Could not get source for {obj.__qualname__}: {e}")
    return textwrap.dedent(source)

  def clean(self, source: str) -> str:
    """
    Applies decorator and docstring stripping to a source snippet.

    Args:
        source: Python source of one or more definitions.

    Returns:
        str: The cleaned code without surrounding blank lines.
    """
    module = cst.parse_module(source)
    cleaned = module.visit(_AnswerCleaner(self.decorator_names, self.strip_docstrings))
    return cleaned.code.strip("\n")

  def helpers_for(self, obj: Any) -> List[Any]:
    """
    Resolves same-module functions and classes referenced by `obj`.

    Dependencies are returned before their dependents and each appears once.

    Args:
        obj: A function or class.

    Returns:
        List[Any]: Helper objects in emission order, excluding `obj`.
    """
    ordered: List[Any] = []
    visiting: Set[int] = {id(obj)}
    self._collect(obj, ordered, visiting)
    return ordered

  def _collect(self, obj: Any, ordered: List[Any], visiting: Set[int]) -> None:
    module = sys.modules.get(obj.__module__)
    if module is None:
      return

    collector = _NameCollector()
    cst.parse_module(self.raw_source(obj)).visit(collector)

    for name in collector.names:
      candidate = getattr(module, name, None)
      if not (inspect.isfunction(candidate) or inspect.isclass(candidate)):
        continue
      if candidate.__module__ != obj.__module__ or id(candidate) in visiting:
        continue
      if self.skip(candidate):
        continue
      visiting.add(id(candidate))
      self._collect(candidate, ordered, visiting)
      ordered.append(candidate)

  def extract(self, obj: Any) -> str:
    """
    Produces the listing for an answer: helpers first, then the answer.

    Args:
        obj: The function or class to extract.

    Returns:
        str: Cleaned source, definitions separated by two blank lines.
    """
    parts = []
    if self.include_helpers:
      parts.extend(self.clean(self.raw_source(h)) for h in self.helpers_for(obj))
    parts.append(self.clean(self.raw_source(obj)))
    return "\n\n\n".join(parts)

"""Benchmark case registration.

Cases are parameterless methods on a plain class, marked with the
``@benchmark`` decorator. The harness instantiates the class once and
times each bound method in isolation.

Example:
    >>> class StringJoin:
    ...     @benchmark(category="join", baseline=True)
    ...     def plus(self):
    ...         return "a" + "b"
    ...
    ...     @benchmark(category="join")
    ...     def join(self):
    ...         return "".join(("a", "b"))
    >>> [case.full_name for case in collect_cases(StringJoin)]
    ['StringJoin.plus', 'StringJoin.join']
"""

from __future__ import annotations

import fnmatch
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional, Sequence, Union

# Attribute the decorator stores case metadata under
_CASE_ATTR = "__benchmark_case__"


class BenchmarkError(Exception):
    """Raised when the harness cannot set up the requested benchmarks."""

    pass


@dataclass(frozen=True)
class BenchmarkCase:
    """A single named measurement scenario.

    Attributes:
        name: Method name of the case
        owner: Name of the class defining the case
        func: Parameterless callable that is timed
        category: Group the case is compared within (optional)
        baseline: Whether the case is the reference of its category
        description: Free-form text shown in listings
    """
    name: str
    owner: str
    func: Callable[[], Any]
    category: Optional[str] = None
    baseline: bool = False
    description: Optional[str] = None

    @property
    def full_name(self) -> str:
        return f"{self.owner}.{self.name}"


def benchmark(
    func: Optional[Callable] = None,
    *,
    name: Optional[str] = None,
    category: Optional[str] = None,
    baseline: bool = False,
    description: Optional[str] = None,
):
    """Mark a method as a benchmark case.

    Usable bare (``@benchmark``) or with keyword arguments
    (``@benchmark(category="true", baseline=True)``).
    """
    def decorate(f: Callable) -> Callable:
        setattr(f, _CASE_ATTR, {
            "name": name or f.__name__,
            "category": category,
            "baseline": baseline,
            "description": description or _first_doc_line(f),
        })
        return f

    if func is not None:
        return decorate(func)
    return decorate


def _first_doc_line(func: Callable) -> Optional[str]:
    doc = func.__doc__
    if not doc:
        return None
    return doc.strip().splitlines()[0]


def _cases_from_class(case_class: type) -> list[BenchmarkCase]:
    """Collect decorated methods of a class in definition order."""
    attr_names = []
    for klass in reversed(case_class.__mro__):
        for attr_name, attr in vars(klass).items():
            if hasattr(attr, _CASE_ATTR) and attr_name not in attr_names:
                attr_names.append(attr_name)

    if not attr_names:
        raise BenchmarkError(
            f"{case_class.__name__} defines no benchmark cases; "
            f"mark methods with @benchmark"
        )

    instance = case_class()
    cases = []
    for attr_name in attr_names:
        bound = getattr(instance, attr_name)
        info = getattr(bound, _CASE_ATTR)
        cases.append(BenchmarkCase(
            name=info["name"],
            owner=case_class.__name__,
            func=bound,
            category=info["category"],
            baseline=info["baseline"],
            description=info["description"],
        ))
    return cases


def collect_cases(
    source: Union[type, Iterable[BenchmarkCase]],
) -> list[BenchmarkCase]:
    """Collect benchmark cases from a case class or an iterable of cases.

    Args:
        source: Class with ``@benchmark`` methods, or ready-made cases

    Returns:
        Cases in definition order

    Raises:
        BenchmarkError: If a class has no cases, or a category has more
            than one baseline
    """
    if isinstance(source, type):
        cases = _cases_from_class(source)
    else:
        cases = list(source)

    baselines: dict[tuple[str, Optional[str]], str] = {}
    for case in cases:
        if not case.baseline:
            continue
        key = (case.owner, case.category)
        if key in baselines:
            raise BenchmarkError(
                f"Category {case.category!r} of {case.owner} has more than one "
                f"baseline: {baselines[key]} and {case.name}"
            )
        baselines[key] = case.name

    return cases


def filter_cases(
    cases: Sequence[BenchmarkCase],
    patterns: Optional[Sequence[str]] = None,
) -> list[BenchmarkCase]:
    """Keep cases whose full or short name matches any glob pattern.

    No patterns keeps every case.
    """
    if not patterns:
        return list(cases)

    return [
        case for case in cases
        if any(
            fnmatch.fnmatchcase(case.full_name, pattern)
            or fnmatch.fnmatchcase(case.name, pattern)
            for pattern in patterns
        )
    ]

"""Main facade for shape validation, conformance checking and binding.

ConformanceChecker composes the pure domain checks with a verdict cache and
turns failed verdicts into ConformanceError where an entry point must abort.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable
from typing import TYPE_CHECKING

from shapebind.application.services.verdict_cache import DEFAULT_CACHE, VerdictCache
from shapebind.domain.binder import ErasedMethod, build_bound, check_pointer
from shapebind.domain.casting import cast_entry
from shapebind.domain.exceptions.conformance import ConformanceError
from shapebind.domain.matcher import MethodMatch, collect_matches
from shapebind.domain.model.configuration import DEFAULT_CONFIG, ShapeConfig
from shapebind.domain.model.pointer import is_pointer
from shapebind.domain.model.report import ConformanceReport
from shapebind.domain.model.shape import ShapeInfo
from shapebind.domain.model.type_ref import type_name
from shapebind.domain.model.verdict import (
    SUCCESS,
    Failure,
    InvalidImplementationType,
    NotAPointer,
    Success,
    UnresolvedAnnotation,
)
from shapebind.domain.shape_validator import inspect_shape, kind_name

if TYPE_CHECKING:
    from shapebind.domain.model.pointer import ConstPtr, Ptr

logger = logging.getLogger(__name__)


def _is_stable(result: object) -> bool:
    """Unresolved forward references may resolve later, so they are not cached."""
    return not isinstance(result, UnresolvedAnnotation)


def _name_of(candidate: object) -> str:
    """Display name of a shape or implementation candidate."""
    name = getattr(candidate, "__name__", None)
    if isinstance(name, str) and name:
        return name
    return kind_name(candidate)


class ConformanceChecker:
    """Validate shapes, check implementations and bind instances.

    Composition-based: accepts config and cache as dependencies.
    Verdicts are pure functions of (shape, implementation, config), so they
    are memoized in the cache for the life of the process.

    Example:
        checker = ConformanceChecker()
        checker.assert_implements(Adder, Counter)
        adder = checker.bind(Adder, Ptr(Counter(value=1)))
        adder.vtable.add(adder.ptr, 1)  # 2
    """

    def __init__(
        self,
        config: ShapeConfig = DEFAULT_CONFIG,
        *,
        cache: VerdictCache | None = None,
    ) -> None:
        """Initialize checker.

        Args:
            config: Field naming convention for shapes
            cache: Verdict cache (default: process-wide cache)
        """
        if config is None:
            raise TypeError("config must not be None")
        self._config = config
        self._cache = cache if cache is not None else DEFAULT_CACHE

    @property
    def config(self) -> ShapeConfig:
        """Field naming convention in use."""
        return self._config

    @property
    def cache(self) -> VerdictCache:
        """Verdict cache in use."""
        return self._cache

    # -------------------------------------------------------------------------
    # Cached domain steps
    # -------------------------------------------------------------------------

    def _cached[T](self, key: Hashable, producer: Callable[[], T]) -> T:
        """Memoize producer by key; unhashable candidates are computed uncached."""
        try:
            hash(key)
        except TypeError:
            return producer()
        return self._cache.get_or_compute(key, producer, keep=_is_stable)

    def describe(self, shape: object) -> ShapeInfo | Failure:
        """Validated shape description, or the shape's failure."""
        return self._cached(
            ("shape", shape, self._config),
            lambda: inspect_shape(shape, self._config),
        )

    def _matches(self, info: ShapeInfo, impl: object) -> tuple[MethodMatch, ...] | Failure:
        """Method matches of impl against a validated shape, or the failure."""
        if not isinstance(impl, type):
            return InvalidImplementationType(actual=kind_name(impl))
        return self._cached(
            ("impl", info.shape, impl, self._config),
            lambda: collect_matches(info, impl),
        )

    # -------------------------------------------------------------------------
    # Verdicts
    # -------------------------------------------------------------------------

    def validate_shape(self, shape: object) -> Success | Failure:
        """Check shape well-formedness.

        Args:
            shape: Candidate interface shape class

        Returns:
            SUCCESS or the first failure found
        """
        info = self.describe(shape)
        if isinstance(info, Failure):
            return info
        return SUCCESS

    def check_implements(self, shape: object, impl: object) -> Success | Failure:
        """Check static conformance of impl to shape, no instance required.

        Args:
            shape: Interface shape class
            impl: Implementation class

        Returns:
            SUCCESS or the first failure found (shape failures first)
        """
        info = self.describe(shape)
        if isinstance(info, Failure):
            return info
        matches = self._matches(info, impl)
        if isinstance(matches, Failure):
            return matches
        return SUCCESS

    def report(self, shape: object, impl: object | None = None) -> ConformanceReport:
        """Verdict packaged with the names it concerns.

        Args:
            shape: Interface shape class
            impl: Implementation class, None for a shape-only check

        Returns:
            ConformanceReport for reporters
        """
        if impl is None:
            return ConformanceReport(_name_of(shape), None, self.validate_shape(shape))
        return ConformanceReport(_name_of(shape), _name_of(impl), self.check_implements(shape, impl))

    # -------------------------------------------------------------------------
    # Aborting entry points
    # -------------------------------------------------------------------------

    def assert_shape(self, shape: object) -> ShapeInfo:
        """Validate shape or abort.

        Returns:
            Validated shape description

        Raises:
            ConformanceError: If shape is ill-formed
        """
        info = self.describe(shape)
        if isinstance(info, Failure):
            raise ConformanceError(info, _name_of(shape))
        return info

    def assert_implements(self, shape: object, impl: object) -> ShapeInfo:
        """Check conformance or abort.

        Returns:
            Validated shape description

        Raises:
            ConformanceError: If shape is ill-formed or impl does not conform
        """
        info = self.assert_shape(shape)
        matches = self._matches(info, impl)
        if isinstance(matches, Failure):
            raise ConformanceError(matches, info.name, _name_of(impl))
        return info

    def bind[S](self, shape: type[S], pointer: Ptr[object] | ConstPtr[object]) -> S:
        """Construct a bound dispatch object, validating everything first.

        Binding never proceeds partially: any failure aborts before the
        shape instance is allocated.

        Args:
            shape: Interface shape class
            pointer: Ptr or ConstPtr to the implementation instance

        Returns:
            Shape instance with erased self pointer and filled method table

        Raises:
            ConformanceError: On any shape, implementation or pointer failure
        """
        info = self.assert_shape(shape)
        if not is_pointer(pointer):
            raise ConformanceError(NotAPointer(actual=kind_name(pointer)), info.name)

        impl = type(pointer.target)
        matches = self._matches(info, impl)
        if isinstance(matches, Failure):
            raise ConformanceError(matches, info.name, impl.__name__)

        pointer_verdict = check_pointer(info, pointer)
        if isinstance(pointer_verdict, Failure):
            raise ConformanceError(pointer_verdict, info.name, impl.__name__)

        bound = build_bound(info, matches, pointer)
        logger.debug(
            "bound %s to %s (%d required, %d optional, %d absent)",
            info.name,
            impl.__name__,
            len(info.required),
            len(info.optional),
            sum(1 for m in matches if not m.present),
        )
        return bound  # type: ignore[return-value]

    def cast_function(self, expected: object, function: Callable[..., object]) -> ErasedMethod:
        """Cast a function to an erased callable type or abort.

        Args:
            expected: ``Callable[[P1, ...], R]`` annotation
            function: Function to cast

        Returns:
            Callable applying erased-pointer unwrapping

        Raises:
            ConformanceError: If the function is not compatible
        """
        entry = cast_entry(expected, function)
        if isinstance(entry, Failure):
            raise ConformanceError(entry, type_name(expected), _name_of(function))
        return entry

from pytest_archon import archrule


def test_core_independence() -> None:
    """
    Core module should not import from the filtering package.
    It is the foundation and must remain independent.
    """
    (
        archrule("core_is_independent")
        .match("restquery_core*")
        .should_not_import("restquery_filtering*")
        .check("restquery_core")
    )


def test_core_is_framework_free() -> None:
    """
    Core must not depend on a web framework; only contrib modules may.
    """
    (
        archrule("core_is_framework_free")
        .match("restquery_core*")
        .should_not_import("fastapi*")
        .should_not_import("starlette*")
        .check("restquery_core")
    )


def test_primitives_isolation() -> None:
    """
    Primitives layer is the lowest level.
    It must not import from events, ports, or validation.
    """
    (
        archrule("primitives_isolation")
        .match("restquery_core.primitives*")
        .should_not_import("restquery_core.events*")
        .should_not_import("restquery_core.ports*")
        .should_not_import("restquery_core.validation*")
        .check("restquery_core")
    )


def test_ports_layering() -> None:
    """
    Ports (interfaces) should not depend on their implementations.
    """
    (
        archrule("ports_layering")
        .match("restquery_core.ports*")
        .should_not_import("restquery_core.events*")
        .should_not_import("restquery_core.serialization*")
        .check("restquery_core")
    )


def test_filtering_logic_isolation() -> None:
    """
    Query binding logic must not depend on framework integrations.
    """
    (
        archrule("filtering_logic_isolation")
        .match("restquery_filtering*")
        .exclude("restquery_filtering.contrib*")
        .should_not_import("restquery_filtering.contrib*")
        .should_not_import("fastapi*")
        .should_not_import("starlette*")
        .check("restquery_filtering")
    )

from pytest_archon import archrule


def test_core_independence() -> None:
    """
    Core must not import from filtering or the block package.
    It is the foundation and must remain independent.
    """
    (
        archrule("core_is_independent")
        .match("glimpse_core*")
        .should_not_import("glimpse_filtering*")
        .should_not_import("glimpse_block*")
        .check("glimpse_core")
    )


def test_filtering_layering() -> None:
    """
    Filtering can import from Core but not from the block package.
    """
    (
        archrule("filtering_layering")
        .match("glimpse_filtering*")
        .should_not_import("glimpse_block*")
        .check("glimpse_filtering")
    )


def test_filtering_has_no_rendering() -> None:
    """
    Query composition stays free of templating.
    """
    (
        archrule("filtering_no_templating")
        .match("glimpse_filtering*")
        .should_not_import("jinja2*")
        .should_not_import("markupsafe*")
        .check("glimpse_filtering")
    )


def test_domain_isolation() -> None:
    """
    Domain layer should be self-contained.
    It must not import from adapters or ports.
    """
    (
        archrule("domain_isolation")
        .match("glimpse_core.domain*")
        .should_not_import("glimpse_core.adapters*")
        .should_not_import("glimpse_core.ports*")
        .check("glimpse_core")
    )


def test_primitives_isolation() -> None:
    """
    Primitives layer is the lowest level.
    It must not import from domain, adapters or ports.
    """
    (
        archrule("primitives_isolation")
        .match("glimpse_core.primitives*")
        .should_not_import("glimpse_core.domain*")
        .should_not_import("glimpse_core.adapters*")
        .should_not_import("glimpse_core.ports*")
        .check("glimpse_core")
    )


def test_ports_layering() -> None:
    """
    Ports (interfaces) should not depend on Adapters (implementations).
    """
    (
        archrule("ports_layering")
        .match("glimpse_core.ports*")
        .should_not_import("glimpse_core.adapters*")
        .check("glimpse_core")
    )

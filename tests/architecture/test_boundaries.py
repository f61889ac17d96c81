from pytest_archon import archrule


def test_primitives_isolation() -> None:
    """
    Primitives layer is the lowest level.
    It must not import from ports, options, executors or loaders.
    """
    (
        archrule("primitives_isolation")
        .match("async_executors.primitives*")
        .should_not_import("async_executors.ports*")
        .should_not_import("async_executors.options*")
        .should_not_import("async_executors.executors*")
        .should_not_import("async_executors.loaders*")
        .check("async_executors")
    )


def test_ports_layering() -> None:
    """
    Ports (protocols) should not depend on the executors implementing them.
    """
    (
        archrule("ports_layering")
        .match("async_executors.ports*")
        .should_not_import("async_executors.executors*")
        .should_not_import("async_executors.loaders*")
        .check("async_executors")
    )


def test_executors_do_not_depend_on_loaders() -> None:
    """
    Loaders build on the invoke-and-track primitive, never the reverse.
    """
    (
        archrule("executors_independence")
        .match("async_executors.executors*")
        .should_not_import("async_executors.loaders*")
        .check("async_executors")
    )


def test_options_isolation() -> None:
    """
    Options only validate configuration; they know nothing of executors.
    """
    (
        archrule("options_isolation")
        .match("async_executors.options")
        .should_not_import("async_executors.executors*")
        .should_not_import("async_executors.loaders*")
        .check("async_executors")
    )

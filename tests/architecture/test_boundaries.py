from pytest_archon import archrule


def test_ports_do_not_depend_on_adapters() -> None:
    """
    Ports describe contracts only.
    They must not import channel implementations or memory adapters.
    """
    (
        archrule("ports_are_abstract")
        .match("cqrs_ddd_channels.ports*")
        .should_not_import("cqrs_ddd_channels.channels*")
        .should_not_import("cqrs_ddd_channels.memory*")
        .check("cqrs_ddd_channels")
    )


def test_identity_is_a_leaf() -> None:
    """
    Identity addresses are the lowest level.
    They must not import channels, ports, templates or adapters.
    """
    (
        archrule("identity_is_a_leaf")
        .match("cqrs_ddd_channels.identity")
        .should_not_import("cqrs_ddd_channels.channels*")
        .should_not_import("cqrs_ddd_channels.ports*")
        .should_not_import("cqrs_ddd_channels.template*")
        .should_not_import("cqrs_ddd_channels.memory*")
        .check("cqrs_ddd_channels")
    )


def test_content_does_not_depend_on_channels() -> None:
    (
        archrule("content_isolation")
        .match("cqrs_ddd_channels.content")
        .match("cqrs_ddd_channels.resolution")
        .should_not_import("cqrs_ddd_channels.channels*")
        .should_not_import("cqrs_ddd_channels.memory*")
        .check("cqrs_ddd_channels")
    )


def test_channels_do_not_depend_on_providers() -> None:
    """
    Channels generate communications; they never dispatch them.
    """
    (
        archrule("channels_do_not_dispatch")
        .match("cqrs_ddd_channels.channels*")
        .should_not_import("cqrs_ddd_channels.memory*")
        .check("cqrs_ddd_channels")
    )

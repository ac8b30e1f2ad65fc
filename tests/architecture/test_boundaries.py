from pytest_archon import archrule


def test_primitives_isolation() -> None:
    """
    Primitives are the foundation: they must not import the middleware
    layer.
    """
    (
        archrule("primitives_isolation")
        .match("middleware_queue.primitives*")
        .should_not_import("middleware_queue.middleware*")
        .check("middleware_queue")
    )


def test_matching_independent_of_queue() -> None:
    """
    Type matching and definitions know nothing about the queue or the
    runner that consume them.
    """
    (
        archrule("matching_independence")
        .match("middleware_queue.middleware.matching")
        .should_not_import("middleware_queue.middleware.queue")
        .should_not_import("middleware_queue.middleware.pipeline")
        .check("middleware_queue")
    )
    (
        archrule("definition_independence")
        .match("middleware_queue.middleware.definition")
        .should_not_import("middleware_queue.middleware.queue")
        .should_not_import("middleware_queue.middleware.pipeline")
        .check("middleware_queue")
    )


def test_queue_does_not_depend_on_runner() -> None:
    """
    The queue only manages ordering; execution lives in the runner.
    """
    (
        archrule("queue_without_runner")
        .match("middleware_queue.middleware.queue")
        .should_not_import("middleware_queue.middleware.pipeline")
        .check("middleware_queue")
    )

def test_can_import_all_protocols():
    # Import must succeed and expose the expected names
    import specdoc.core.interfaces as I

    assert hasattr(I, "BackendInvokerProtocol")
    assert hasattr(I, "InvocationStrategyProtocol")
    assert hasattr(I, "FileCollectorProtocol")
    assert hasattr(I, "DocumentAssemblerProtocol")
    assert hasattr(I, "LoggerFactoryProtocol")
    assert hasattr(I, "LoggerLikeProtocol")


def test_defaults_satisfy_protocols():
    from specdoc.ai.backend_invoker import BackendInvoker, ChatCompletionInvocation, StructuredResponseInvocation
    from specdoc.core.interfaces import (
        BackendInvokerProtocol,
        DocumentAssemblerProtocol,
        FileCollectorProtocol,
        InvocationStrategyProtocol,
        LoggerFactoryProtocol,
    )
    from specdoc.discovery.file_collector import FileCollector
    from specdoc.logging.factory import DefaultLoggerFactory
    from specdoc.rendering.document_assembler import DocumentAssembler

    assert isinstance(BackendInvoker(object(), model="m", reasoning_effort="low"), BackendInvokerProtocol)
    assert isinstance(StructuredResponseInvocation(), InvocationStrategyProtocol)
    assert isinstance(ChatCompletionInvocation(), InvocationStrategyProtocol)
    assert isinstance(FileCollector(), FileCollectorProtocol)
    assert isinstance(DocumentAssembler(), DocumentAssemblerProtocol)
    assert isinstance(DefaultLoggerFactory(), LoggerFactoryProtocol)


def test_package_surface():
    import specdoc

    assert specdoc.__version__
    for name in specdoc.__all__:
        assert hasattr(specdoc, name), name


def test_loggers_satisfy_logger_protocols():
    import logging

    from specdoc.core.interfaces import LoggerLikeProtocol
    from specdoc.logging.factory import DefaultLoggerFactory
    from tests.fakes import RecordingLogger

    assert isinstance(logging.getLogger("specdoc.test"), LoggerLikeProtocol)
    assert isinstance(RecordingLogger(), LoggerLikeProtocol)
    assert isinstance(DefaultLoggerFactory().get_logger("test"), LoggerLikeProtocol)
    assert not isinstance(object(), LoggerLikeProtocol)

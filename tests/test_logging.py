"""日志配置测试。"""

from __future__ import annotations

import pytest

from topsdk.common.logging import LoggerMixin, logger, setup_logging, teardown_logging

from .conftest import RecordingHandler


@pytest.fixture
def sdk_logging():
    setup_logging("DEBUG")
    yield
    teardown_logging()


@pytest.fixture
def records():
    collected = []
    handler_id = logger.add(collected.append, level="DEBUG", format="{message}")
    yield collected
    logger.remove(handler_id)


def _sdk_records(records):
    return [message for message in records if message.record["name"].startswith("topsdk")]


@pytest.mark.anyio
async def test_sdk_is_silent_by_default(make_client, records):
    make_client(RecordingHandler()).build_request({"method": "foo"})

    assert _sdk_records(records) == []


@pytest.mark.anyio
async def test_setup_logging_enables_sdk_logs(capsys, make_client, records, sdk_logging):
    client = make_client(RecordingHandler())
    client.build_request({"method": "foo"})

    messages = [str(message) for message in _sdk_records(records)]
    assert any("HTTP客户端初始化" in message for message in messages)
    assert any("签名参数" in message for message in messages)
    assert "签名参数" in capsys.readouterr().err


@pytest.mark.anyio
async def test_teardown_logging_silences_sdk_again(make_client, records):
    setup_logging("DEBUG")
    teardown_logging()

    make_client(RecordingHandler()).build_request({"method": "foo"})

    assert _sdk_records(records) == []


def test_setup_logging_keeps_host_sinks(records):
    setup_logging("INFO")
    try:
        setup_logging("DEBUG")
        logger.info("host message")
    finally:
        teardown_logging()

    assert any("host message" in str(message) for message in records)


def test_setup_logging_writes_file(tmp_path, sdk_logging):
    log_file = tmp_path / "sdk.log"
    setup_logging("INFO", log_file=str(log_file))

    logger.info("written to file")
    logger.complete()

    assert "written to file" in log_file.read_text(encoding="utf-8")


def test_logger_mixin_binds_class_name(records):
    class Service(LoggerMixin):
        pass

    Service().logger.info("hello")

    assert records
    assert records[-1].record["extra"]["name"].endswith(".Service")

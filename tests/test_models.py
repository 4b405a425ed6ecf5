import pytest

from httpbench.core.models import (
    BAD_REQUEST_SENTINEL,
    ConfigError,
    LoadConfig,
    RequestOutcome,
)


def test_method_is_normalised():
    assert LoadConfig(concurrency=1, url="http://x/", total_number=1, method="post").method == "POST"


def test_count_takes_precedence_over_duration():
    config = LoadConfig(concurrency=1, url="http://x/", total_number=5, duration=3)
    assert config.is_count_bounded
    assert not config.is_duration_bounded
    assert config.mode == "count"


def test_duration_mode_when_no_count():
    config = LoadConfig(concurrency=1, url="http://x/", total_number=0, duration=3)
    assert config.is_duration_bounded
    assert config.mode == "duration"


def test_default_timeout_is_one_second():
    assert LoadConfig().timeout == 1.0


@pytest.mark.parametrize(
    "kwargs, message",
    [
        ({"concurrency": 1, "total_number": 1}, "-u and -f"),
        ({"concurrency": 0, "url": "http://x/", "total_number": 1}, "-c"),
        ({"concurrency": 1, "url": "http://x/"}, "-n or -a"),
        ({"concurrency": 1, "url": "http://x/", "total_number": 1, "method": "put"}, "-m"),
        ({"concurrency": 1, "url": "http://x/", "total_number": -1}, "-n"),
        ({"concurrency": 1, "url": "http://x/", "duration": 2, "timeout": 0}, "-t"),
    ],
)
def test_validate_rejects(kwargs, message):
    with pytest.raises(ConfigError, match=message):
        LoadConfig(**kwargs).validate()


def test_validate_accepts_file_without_url():
    LoadConfig(concurrency=2, file_path="params.txt", duration=1).validate()


def test_failure_outcome_is_sentinel():
    outcome = RequestOutcome.failure(0.25)
    assert outcome.status_code == BAD_REQUEST_SENTINEL == 400
    assert outcome.byte_length == 0
    assert outcome.latency == 0.25

"""Workload planning: turn a config and parameter lines into request descriptors."""

from typing import List

from .models import LoadConfig, RequestDescriptor

# Placeholder size of the base sequence when no count is given.
DEFAULT_BASE_SIZE = 10


def build_base(config: LoadConfig, lines: List[str]) -> List[RequestDescriptor]:
    """
    Build the natural base sequence for a run.

    With parameter lines there is one descriptor per line: GET appends the
    line verbatim to the URL, POST joins it to the static data with "&".
    Without lines the same descriptor is repeated once per requested request
    (or DEFAULT_BASE_SIZE times in duration mode).
    """
    method = config.method
    timeout = config.timeout
    repeat = config.total_number if config.is_count_bounded else DEFAULT_BASE_SIZE

    if method == "GET":
        if not lines:
            return [
                RequestDescriptor(url=config.url, method=method, timeout=timeout)
                for _ in range(repeat)
            ]
        return [
            RequestDescriptor(url=config.url + line, method=method, timeout=timeout)
            for line in lines
        ]

    prefix = config.post_data + "&" if config.post_data else ""
    if not lines:
        return [
            RequestDescriptor(
                url=config.url, method=method, body=config.post_data, timeout=timeout
            )
            for _ in range(repeat)
        ]
    return [
        RequestDescriptor(
            url=config.url, method=method, body=prefix + line, timeout=timeout
        )
        for line in lines
    ]


def extend_round_robin(
    base: List[RequestDescriptor], target: int
) -> List[RequestDescriptor]:
    """
    Extend base to target entries by cycling through it in order.

    A base that already holds target entries or more is returned as-is;
    it is never truncated.
    """
    work = list(base)
    if not base or target <= len(base):
        return work

    base_len = len(base)
    for index in range(target - base_len):
        work.append(base[index % base_len])
    return work


def plan(config: LoadConfig, lines: List[str]) -> List[RequestDescriptor]:
    """Resolve the work source for a run."""
    base = build_base(config, lines)
    if config.is_count_bounded:
        return extend_round_robin(base, config.total_number)
    return base

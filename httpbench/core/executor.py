"""Single HTTP request execution."""

import asyncio
import aiohttp
import logging
import time

from .models import RequestDescriptor, RequestOutcome

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


class RequestExecutor:
    """Issues one request per descriptor on a shared aiohttp session."""

    def __init__(self, session: aiohttp.ClientSession):
        self.session = session
        self.logger = logging.getLogger(__name__)

    async def execute(self, descriptor: RequestDescriptor) -> RequestOutcome:
        """
        Send a request and measure it.

        Connection failures and timeouts are turned into the failure
        sentinel outcome; latency is always the time actually elapsed.
        """
        timeout = aiohttp.ClientTimeout(total=descriptor.timeout)
        start_time = time.perf_counter()

        try:
            if descriptor.method == "POST":
                request = self.session.post(
                    descriptor.url,
                    data=descriptor.body,
                    headers={"Content-Type": FORM_CONTENT_TYPE},
                    timeout=timeout,
                )
            else:
                request = self.session.get(descriptor.url, timeout=timeout)

            async with request as response:
                body = await response.read()
                latency = time.perf_counter() - start_time
                return RequestOutcome(
                    latency=latency,
                    status_code=response.status,
                    byte_length=len(body),
                )

        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            latency = time.perf_counter() - start_time
            self.logger.debug(
                f"{descriptor.method} {descriptor.url} failed after "
                f"{latency * 1000:.0f}ms: {e!r}"
            )
            return RequestOutcome.failure(latency)

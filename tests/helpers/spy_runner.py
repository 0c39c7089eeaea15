"""Recording stand-in for ``CommandRunner``."""

from __future__ import annotations

from types import SimpleNamespace
from typing import Any, List, Optional


class SpyRunner:
    """Stands in for CommandRunner: records every invocation and replays queued responses."""

    def __init__(self, *responses: Any, default: str = "") -> None:
        self.responses: List[Any] = list(responses)
        self.default = default
        self.calls: List[SimpleNamespace] = []

    @property
    def arguments(self) -> List[List[str]]:
        return [call.arguments for call in self.calls]

    async def run(
        self,
        executable,
        arguments=(),
        working_directory=None,
        *,
        env: Optional[dict] = None,
        timeout: Optional[float] = None,
    ) -> str:
        self.calls.append(
            SimpleNamespace(
                executable=executable,
                arguments=list(arguments),
                working_directory=working_directory,
                env=env,
                timeout=timeout,
            )
        )
        response = self.responses.pop(0) if self.responses else self.default
        if isinstance(response, BaseException):
            raise response
        return response

    async def run_bytes(self, executable, arguments=(), working_directory=None, *, env=None, timeout=None) -> bytes:
        output = await self.run(executable, arguments, working_directory, env=env, timeout=timeout)
        return output.encode("utf-8")

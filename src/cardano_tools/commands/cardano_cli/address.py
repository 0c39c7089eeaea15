"""``cardano-cli <era> address`` commands."""

import logging
from typing import Sequence

from ..base import EraCommandGroup

logger = logging.getLogger(__name__)


class AddressCommands(EraCommandGroup):
    noun = "address"

    async def info(self, arguments: Sequence[str]) -> str:
        return await self.execute("info", arguments)

    async def key_gen(self, arguments: Sequence[str]) -> str:
        return await self.execute("key-gen", arguments)

    async def key_hash(self, arguments: Sequence[str]) -> str:
        return await self.execute("key-hash", arguments)

    async def build(self, arguments: Sequence[str]) -> str:
        return await self.execute_with_network("build", arguments)

    async def build_script(self, arguments: Sequence[str]) -> str:
        """Deprecated upstream in favour of ``build --payment-script-file``."""
        logger.warning("build-script is deprecated; use 'build' instead with '--payment-script-file'")
        return await self.execute("build-script", arguments)

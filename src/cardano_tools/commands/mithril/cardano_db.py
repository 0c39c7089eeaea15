"""``mithril-client cardano-db`` commands."""

from __future__ import annotations

from typing import List, Optional, Sequence

from ..base import optional_flag
from .base import MithrilCommandGroup


class CardanoDbCommands(MithrilCommandGroup):
    noun = "cardano-db"

    async def snapshot_list(self, arguments: Sequence[str] = ()) -> str:
        return await self.execute("snapshot", ["list", *arguments])

    async def snapshot_show(self, digest: str, arguments: Sequence[str] = ()) -> str:
        return await self.execute("snapshot", ["show", digest, *arguments])

    async def download(
        self,
        digest: str = "latest",
        download_dir: Optional[str] = None,
        include_ancillary: bool = False,
        ancillary_verification_key: Optional[str] = None,
        arguments: Sequence[str] = (),
    ) -> str:
        """Download and restore a snapshot; the ancillary key is only sent with ``include_ancillary``."""
        args: List[str] = [*optional_flag("--download-dir", download_dir)]
        if include_ancillary:
            args.append("--include-ancillary")
            args.extend(optional_flag("--ancillary-verification-key", ancillary_verification_key))
        args.append(digest)
        args.extend(arguments)
        return await self.execute("download", args)

    async def download_skip_ancillary(
        self,
        digest: str = "latest",
        download_dir: Optional[str] = None,
        arguments: Sequence[str] = (),
    ) -> str:
        return await self.download(digest, download_dir, include_ancillary=False, arguments=arguments)

    async def verify(self, arguments: Sequence[str] = ()) -> str:
        return await self.execute("verify", arguments)

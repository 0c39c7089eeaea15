"""
``cardano-cli <era> query`` commands.

Every query talks to the node, so the network flags are always appended.
"""

from typing import List, Sequence

from ...results import ChainTip
from ..base import EraCommandGroup, split_lines


class QueryCommands(EraCommandGroup):
    noun = "query"

    async def tip(self, arguments: Sequence[str] = ()) -> ChainTip:
        output = await self.execute_with_network("tip", arguments)
        return ChainTip.from_json(output)

    async def protocol_parameters(self, arguments: Sequence[str] = ()) -> str:
        return await self.execute_with_network("protocol-parameters", arguments)

    async def stake_address_info(self, arguments: Sequence[str]) -> str:
        return await self.execute_with_network("stake-address-info", arguments)

    async def stake_pools(self, arguments: Sequence[str] = ()) -> List[str]:
        return split_lines(await self.execute_with_network("stake-pools", arguments))

    async def utxo(self, arguments: Sequence[str]) -> str:
        return await self.execute_with_network("utxo", arguments)

    async def kes_period_info(self, arguments: Sequence[str]) -> str:
        return await self.execute_with_network("kes-period-info", arguments)

    async def leadership_schedule(self, arguments: Sequence[str]) -> str:
        return await self.execute_with_network("leadership-schedule", arguments)

    async def stake_distribution(self, arguments: Sequence[str] = ()) -> str:
        return await self.execute_with_network("stake-distribution", arguments)

    async def ledger_state(self, arguments: Sequence[str] = ()) -> str:
        return await self.execute_with_network("ledger-state", arguments)

    async def protocol_state(self, arguments: Sequence[str] = ()) -> str:
        return await self.execute_with_network("protocol-state", arguments)

    async def stake_snapshot(self, arguments: Sequence[str]) -> str:
        return await self.execute_with_network("stake-snapshot", arguments)

    async def pool_params(self, arguments: Sequence[str]) -> str:
        return await self.execute_with_network("pool-params", arguments)

    async def pool_state(self, arguments: Sequence[str]) -> str:
        return await self.execute_with_network("pool-state", arguments)

    async def tx_mempool(self, arguments: Sequence[str]) -> str:
        return await self.execute_with_network("tx-mempool", arguments)

    async def slot_number(self, arguments: Sequence[str]) -> str:
        return await self.execute_with_network("slot-number", arguments)

    async def ref_script_size(self, arguments: Sequence[str]) -> str:
        return await self.execute_with_network("ref-script-size", arguments)

    async def constitution(self, arguments: Sequence[str] = ()) -> str:
        return await self.execute_with_network("constitution", arguments)

    async def gov_state(self, arguments: Sequence[str] = ()) -> str:
        return await self.execute_with_network("gov-state", arguments)

    async def drep_state(self, arguments: Sequence[str]) -> str:
        return await self.execute_with_network("drep-state", arguments)

    async def drep_stake_distribution(self, arguments: Sequence[str]) -> str:
        return await self.execute_with_network("drep-stake-distribution", arguments)

    async def spo_stake_distribution(self, arguments: Sequence[str]) -> str:
        return await self.execute_with_network("spo-stake-distribution", arguments)

    async def committee_state(self, arguments: Sequence[str] = ()) -> str:
        return await self.execute_with_network("committee-state", arguments)

    async def treasury(self, arguments: Sequence[str] = ()) -> str:
        return await self.execute_with_network("treasury", arguments)

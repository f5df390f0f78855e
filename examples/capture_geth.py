"""Example capture loop against a local geth node.

Run with:
    NODETELEMETRY_RPC_URL=http://localhost:8545 python examples/capture_geth.py

The node must expose the debug, admin and txpool RPC namespaces, e.g.:
    geth --http --http.api eth,debug,admin,txpool

Each capture prints the output messages as NDJSON on stdout and keeps the
last messages in a ring buffer sink.
"""

import asyncio
import sys
import time

from nodetelemetry.adapters.logging import configure_logging
from nodetelemetry.adapters.rpc import JsonRpcClient, web3_client_version
from nodetelemetry.adapters.sinks import RingBufferMessageSink
from nodetelemetry.capture.geth import GethAdapter
from nodetelemetry.config import CaptureConfig
from nodetelemetry.core.encoding.ndjson import encode_messages

config = CaptureConfig.from_env()
logger = configure_logging(config.log_level)
sink = RingBufferMessageSink(max_size=1000)


async def main() -> None:
    async with JsonRpcClient(config.rpc_url, timeout=config.request_timeout) as client:
        version = await client.request(web3_client_version())
        adapter = GethAdapter(version)
        await adapter.initialize(client)
        logger.info("Capturing from %s (enode=%s)", adapter.full_version, adapter.enode)

        while True:
            messages = await adapter.capture_node_stats(client, time.time())
            for message in messages:
                await sink.write(message)
            sys.stdout.write(encode_messages(messages))
            sys.stdout.flush()
            await asyncio.sleep(config.capture_interval)


if __name__ == "__main__":
    asyncio.run(main())

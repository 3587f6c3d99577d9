import logging

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import Tool

from folderscope.handlers import TOOL_NAME, handle_analyze_local_folder, tool_input_schema

logger = logging.getLogger(__name__)

SERVER_NAME = "folderscope"


def list_tool_definitions():
    return [
        Tool(
            name=TOOL_NAME,
            description=(
                "Analyze a local project folder with an LLM. Reads the text files in "
                "the folder and answers a question about them in one of several "
                "expert modes (general, security, performance, architecture, ...). "
                "Rotates across the configured API keys when the upstream service "
                "is rate limiting or overloaded."
            ),
            inputSchema=tool_input_schema(),
        )
    ]


async def dispatch_tool(name, arguments):
    if name == TOOL_NAME:
        return await handle_analyze_local_folder(arguments)
    raise ValueError(f"Unknown tool: {name}")


def create_server():
    server = Server(SERVER_NAME)

    @server.list_tools()
    async def list_tools():
        return list_tool_definitions()

    @server.call_tool()
    async def call_tool(name, arguments):
        logger.info("🛠️ Tool call: %s", name)
        return await dispatch_tool(name, arguments)

    return server


async def run_server():
    server = create_server()
    async with stdio_server() as (read_stream, write_stream):
        logger.info("🤖 %s ready on stdio", SERVER_NAME)
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )

import argparse
import asyncio

from fastmcp import Client


async def main(url: str, text: str) -> None:
    async with Client(url) as client:
        tools = await client.list_tools()

        print(f"Available tools ({len(tools)}):")
        for tool in tools:
            print(f"* **{tool.name}**: {tool.description}")

        result = await client.call_tool("correct_spelling", {"text": text})
        print(result.content[0].text)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Ask a running speller MCP server to correct some text.")
    parser.add_argument("text", help="Text to correct")
    parser.add_argument("--url", default="http://localhost:8000/mcp", help="MCP server endpoint")
    args = parser.parse_args()
    asyncio.run(main(args.url, args.text))

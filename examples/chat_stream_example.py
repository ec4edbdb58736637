# Here we will stream the chat completion endpoint
import asyncio
import logging
import sys

from openai_lite import ChatArguments, ChatMessage, Client, Settings


async def main() -> None:
    async with Client() as client:
        args = ChatArguments(model="gpt-3.5-turbo", messages=[ChatMessage.user("Hello GPT!")])
        async with await client.create_chat_stream(args) as stream:
            async for chunk in stream:
                sys.stdout.write(str(chunk))
                sys.stdout.flush()
        print()


if __name__ == "__main__":
    logging.basicConfig(
        level=Settings().LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    asyncio.run(main())

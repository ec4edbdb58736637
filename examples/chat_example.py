# Here we will use the chat completion endpoint
import asyncio
import logging

from openai_lite import ChatArguments, ChatMessage, Client, Settings


async def main() -> None:
    async with Client() as client:
        args = ChatArguments(model="gpt-3.5-turbo", messages=[ChatMessage.user("Hello GPT!")])
        res = await client.create_chat(args)
        print(res.choices[0].message.content)


if __name__ == "__main__":
    logging.basicConfig(
        level=Settings().LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    asyncio.run(main())

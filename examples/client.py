import asyncio
import logging
from typing import Protocol, runtime_checkable

from pydantic import BaseModel

from papyrus import (
    ApiClientBuilder,
    Body,
    CurlLogger,
    CurlTrigger,
    Get,
    Multipart,
    Part,
    PapyrusSettings,
    Post,
    Provider,
    Query,
    RestClient,
)


class HttpBinArgs(BaseModel):
    args: dict[str, str]


class HttpBinEcho(BaseModel):
    data: str = ""
    files: dict[str, str] = {}


@RestClient("/")
@runtime_checkable
class HttpBinAPI(Protocol):

    @Get("/get")
    @Query("gather")
    async def get_with_query(self, gather: str) -> HttpBinArgs: ...

    @Post("/post")
    @Body("payload")
    async def post_json(self, payload: dict[str, object]) -> HttpBinEcho: ...

    @Post("/post")
    @Multipart()
    async def upload(self, note: str, attachment: Part) -> HttpBinEcho: ...


async def main() -> None:
    logging.basicConfig(level=logging.INFO)

    settings = PapyrusSettings.from_env()
    provider = Provider.from_settings(settings)
    if not provider.base_url:
        provider.base_url = "https://httpbin.org"
    if settings.curl_log is None:
        provider.add_interceptor(CurlLogger(when=CurlTrigger.ALWAYS))

    client = ApiClientBuilder(provider).build(HttpBinAPI)

    print(await client.get_with_query("hello-world"))
    print(await client.post_json({"message": "hello", "number": 42}))
    print(
        await client.upload(
            "greeting",
            Part(data=b"hello", file_name="hello.txt", mime_type="text/plain"),
        )
    )


if __name__ == "__main__":
    asyncio.run(main())

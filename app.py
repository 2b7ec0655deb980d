import os
from contextlib import asynccontextmanager

# Imported first: uptime is measured from here
from nobot import responses  # noqa: F401

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slack_bolt.async_app import AsyncApp
from slack_bolt.adapter.fastapi.async_handler import AsyncSlackRequestHandler

from nobot.agenda import Agenda
from nobot.config import get_bot_names, get_mongo_db_name, validate_environment_variables
from nobot.constants import AGENDA_COLLECTION
from nobot.db import connect
from nobot.directory import SlackDirectory
from nobot.dispatcher import Dispatcher
from nobot.logger import logger
from nobot.models import Message
from nobot.store import MongoSetStore
from nobot.transport import SlackTransport
from nobot.workspace import identify_bot, log_workspace_summary

# Validate environment variables at startup
validate_environment_variables()

db = connect(os.environ["MONGO_URL"], get_mongo_db_name())

# Slack app setup
slack_app = AsyncApp(
    token=os.environ["SLACK_BOT_TOKEN"],
    signing_secret=os.environ["SLACK_SIGNING_SECRET"],
    # Ensure Slack gets an ACK within 3 seconds; replies go out as background tasks
    process_before_response=True,
)

directory = SlackDirectory(slack_app.client)
dispatcher = Dispatcher(
    directory=directory,
    transport=SlackTransport(slack_app.client),
    agenda=Agenda(MongoSetStore(db[AGENDA_COLLECTION])),
    names=get_bot_names(),
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    dispatcher.bot_user_id = await identify_bot(slack_app.client)
    await log_workspace_summary(directory)
    yield
    await dispatcher.drain()


fastapi_app = FastAPI(lifespan=lifespan)
handler = AsyncSlackRequestHandler(slack_app)


# Main event handler
@slack_app.event("message")
async def handle_message(event):
    message = Message.from_event(event)
    fired = await dispatcher.dispatch(message)
    if not fired:
        logger.debug(f"No rule matched message in {message.channel_id}")


@fastapi_app.post("/slack/events")
async def slack_events(request: Request):
    # Delegate to Slack Bolt FastAPI handler
    return await handler.handle(request)


@fastapi_app.get("/")
async def ping():
    return JSONResponse({"status": "ok"})


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app:fastapi_app",
        host="0.0.0.0",
        port=int(os.getenv("PORT", 3000)),
        reload=os.getenv("ENV") != "prod",
    )

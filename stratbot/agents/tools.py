"""
Tools available to the StratBot agent.

Tools are functions the language model can call. The World Bank tools share
one ``WorldBankApiClient`` so its topic and indicator caches live as long as
the process; every tool returns its records as a JSON string.
"""
from __future__ import annotations

import logging
from typing import Annotated, List, Optional, Union

from langchain_core.tools import BaseTool, StructuredTool
from pydantic import BaseModel, Field

from ..exceptions import get_error_response
from ..providers.worldbank import WorldBankApiClient
from ..utils.params import ALL
from ..utils.serialization import json_serialize
from .plot import plot_tool

logger = logging.getLogger(__name__)


class TopicsInput(BaseModel):
    """No arguments."""


class IndicatorsByTopicInput(BaseModel):
    topicId: str = Field(..., description="The ID of the topic to get indicators for.")


class DatasetByIndicatorInput(BaseModel):
    indicatorId: str = Field(..., description="The ID of the indicator to get dataset for.")
    countryCode: Union[str, List[str]] = Field(
        default_factory=lambda: [ALL],
        description="The country ISO2 or ISO3 code or all to filter the dataset.",
    )
    date: Optional[Union[str, Annotated[List[str], Field(max_length=2)]]] = Field(
        default=None,
        description="The date or date range (as [start, end]) to filter the dataset.",
    )


def create_world_bank_tools(client: WorldBankApiClient) -> List[BaseTool]:
    """Create the World Bank tools bound to ``client``."""

    async def get_topics() -> str:
        topics = await client.get_topics()
        return json_serialize(topics)

    async def get_indicators_by_topic(topicId: str) -> str:
        indicators = await client.get_indicators_by_topic_id(topicId)
        return json_serialize(indicators)

    async def get_dataset_by_indicator(
        indicatorId: str,
        countryCode: Union[str, List[str], None] = None,
        date: Union[str, List[str], None] = None,
    ) -> str:
        records = await client.fetch_data_for_indicator(
            indicatorId,
            country_code=countryCode if countryCode is not None else [ALL],
            date=date,
        )
        logger.info(f"Dataset tool returned {len(records)} records for {indicatorId}")
        return json_serialize(records)

    return [
        StructuredTool.from_function(
            coroutine=get_topics,
            name="get_world_bank_api_topics",
            description="Get a list of topics from the World Bank API.",
            args_schema=TopicsInput,
        ),
        StructuredTool.from_function(
            coroutine=get_indicators_by_topic,
            name="get_world_bank_api_indicators_by_topic",
            description="Get a list of indicators for a given topic from the World Bank API.",
            args_schema=IndicatorsByTopicInput,
        ),
        StructuredTool.from_function(
            coroutine=get_dataset_by_indicator,
            name="get_world_bank_api_dataset_by_indicator",
            description="Get dataset for a given indicator from the World Bank API.",
            args_schema=DatasetByIndicatorInput,
        ),
    ]


def format_tool_error(error: Exception) -> str:
    """Report a failed tool call to the model as a JSON error payload."""
    logger.error(f"Tool call failed: {error}")
    return json_serialize(get_error_response(error), default=str)


world_bank_client = WorldBankApiClient()

# Add new tools to this list to make them available to the agent
TOOLS: List[BaseTool] = [
    *create_world_bank_tools(world_bank_client),
    plot_tool,
]


def get_tool(name: str) -> Optional[BaseTool]:
    """Look up a registered tool by name."""
    return next((tool for tool in TOOLS if tool.name == name), None)

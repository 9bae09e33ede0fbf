"""
StratBot agent

A two-node LangGraph loop: the chat model decides which tool to call, the
tool node executes it, and the result goes back to the model.

Components:
- TOOLS: World Bank tools and the plot tool exposed to the model
- create_agent_graph / get_agent_graph: the compiled agent workflow
- Configuration: system prompt and model selection for one run
"""

from .configuration import Configuration, load_chat_model
from .graph import create_agent_graph, get_agent_graph, route_model_output
from .tools import TOOLS, create_world_bank_tools

__all__ = [
    "Configuration",
    "load_chat_model",
    "create_agent_graph",
    "get_agent_graph",
    "route_model_output",
    "TOOLS",
    "create_world_bank_tools",
]

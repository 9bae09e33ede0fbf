"""
LangGraph-based agent graph.

Two nodes cycle until the model stops calling tools:

```
START → call_model ──(tool calls)──→ tools
            ↑                          │
            └──────────────────────────┘
        (no tool calls) → END
```
"""
import logging
from typing import Any, Dict, Literal, Optional

from langchain_core.messages import AIMessage, SystemMessage
from langchain_core.runnables import RunnableConfig
from langgraph.graph import END, START, MessagesState, StateGraph
from langgraph.prebuilt import ToolNode

from .configuration import Configuration, load_chat_model
from .tools import TOOLS, format_tool_error

logger = logging.getLogger(__name__)


# ============================================================================
# Node Functions
# ============================================================================

async def call_model(state: MessagesState, config: RunnableConfig) -> Dict[str, Any]:
    """
    Call the LLM powering the agent.

    The system prompt is prepended on every call; the response is appended
    to the message list by the MessagesState reducer.
    """
    configuration = Configuration.from_runnable_config(config)
    model = load_chat_model(configuration.model).bind_tools(TOOLS)

    response = await model.ainvoke(
        [SystemMessage(content=configuration.system_prompt), *state["messages"]],
        config,
    )

    if isinstance(response, AIMessage) and response.tool_calls:
        logger.info(f"Model requested tools: {[call['name'] for call in response.tool_calls]}")
    return {"messages": [response]}


def route_model_output(state: MessagesState) -> Literal["tools", "__end__"]:
    """Route to the tool executor if the model asked for tools, else finish."""
    messages = state.get("messages", [])
    last_message = messages[-1] if messages else None
    if not isinstance(last_message, AIMessage):
        return END
    return "tools" if last_message.tool_calls else END


def create_agent_graph(checkpointer: Optional[Any] = None):
    """
    Create the StratBot agent graph.

    Args:
        checkpointer: Optional checkpointer for state persistence across turns

    Returns:
        Compiled StateGraph
    """
    graph = StateGraph(MessagesState)

    graph.add_node("call_model", call_model)
    graph.add_node("tools", ToolNode(TOOLS, handle_tool_errors=format_tool_error))

    graph.add_edge(START, "call_model")
    graph.add_conditional_edges(
        "call_model",
        route_model_output,
        {
            "tools": "tools",
            END: END,
        }
    )
    # Tool outputs go back to the model
    graph.add_edge("tools", "call_model")

    return graph.compile(checkpointer=checkpointer)


# ============================================================================
# Singleton Instance
# ============================================================================

_agent_graph = None


def get_agent_graph():
    """Get or create the singleton agent graph."""
    global _agent_graph
    if _agent_graph is None:
        _agent_graph = create_agent_graph()
        logger.info("StratBot agent graph created")
    return _agent_graph

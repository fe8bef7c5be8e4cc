"""Prompt builder for the todo assistant."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..tools.registry import ToolRegistry

SYSTEM_PROMPT_BASE = """You are an AI to-do list assistant that respond in JSON format and have ability with START, PLAN, ACTION, Observation and Output state.
Wait for the user prompt and first PLAN using available tools.
After Planning, Take the action with appropriate tools and wait for Observation based on Action.
Once you get the observations, Return the AI response based on START prompt and observations

You can manage tasks by adding, viewing, updating, and deleting them.
You must strictly follow the JSON output format.

Todo DB Schema:
 id: String and Primary Key
 title: String
 created_at: Date Time
 updated_at: Date Time

Available Tools:
{tools_description}

Your responses MUST be in one of these JSON formats:

Example:

{examples}

Remember:
- Always respond in valid JSON
- Respond with exactly one JSON object per message
- Always use action for todo related operations
- Keep responses natural but focused on todo information"""

WORKED_EXAMPLES = """\
{ "type": "user", "user": "Add a task for shopping groceries." }
{ "type": "plan", "plan": "I will try to get more context on what user needs to shop." }
{ "type": "output", "output": "Can you tell me what all items you want to shop for?" }
{ "type": "user", "user": "I want to shop for milk, kurkure, lays and choco." }
{ "type": "plan", "plan": "I will use createTodo to create a new Todo in DB." }
{ "type": "action", "function": "createTodo", "input": "Shopping for milk, kurkure, lays and choco." }
{ "type": "observation", "observation": "2" }
{ "type": "output", "output": "Your todo has been added successfully" }
{ "type": "user", "user": "I want to update the todo that contain milk" }
{ "type": "plan", "plan": "I will use updateTodoById to update the Todo in DB." }
{ "type": "action", "function": "updateTodoById", "id": "2", "input": "i have shopped for milk" }
{ "type": "observation", "observation": "2" }
{ "type": "output", "output": "Your todo has been updated successfully" }
{ "type": "user", "user": "I want to delete the todo that contain milk or i have shopped for milk" }
{ "type": "plan", "plan": "I will use deleteTodoById to delete the Todo in DB." }
{ "type": "action", "function": "deleteTodoById", "id": "2" }
{ "type": "observation", "observation": "2" }
{ "type": "output", "output": "Your todo has been deleted successfully" }"""

INVALID_JSON_MESSAGE = (
    "Your last response was not valid JSON. Please respond in the correct JSON format."
)


def build_system_prompt(registry: ToolRegistry | None = None) -> str:
    """Build the system prompt listing the registered tools.

    Args:
        registry: Tools the model may call. None or empty lists no tools.

    Returns:
        Complete system prompt string.
    """
    tools = registry.tools() if registry is not None else []
    if not tools:
        tools_desc = " No tools available."
    else:
        tools_desc = "\n".join(f" - {tool.signature}: {tool.description}" for tool in tools)

    return SYSTEM_PROMPT_BASE.format(tools_description=tools_desc, examples=WORKED_EXAMPLES)


def unknown_function_message(function: str, available: list[str]) -> str:
    return (
        f"The function {function} is not available. "
        f"Available functions are: {', '.join(available)}"
    )


def unknown_type_message(action_type: object) -> str:
    return f"Unknown action type: {action_type}. Expected 'output' or 'action'."


def tool_error_message(function: str, error: str | None) -> str:
    return f"Error executing {function}: {error}"


def transport_error_message(error: Exception) -> str:
    return f"API error occurred: {error}. Let's try a different approach."


def turn_error_message(error: Exception) -> str:
    return f"Error: {error}. Please try again with a different request."

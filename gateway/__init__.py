"""
Gateway module - Request validation, tool registry and dispatch.

Components:
    - schemas: pydantic models for the envelope, tool inputs and responses
    - validation: envelope and tool-input checks returning issue lists
    - registry: name-keyed tool registry with a registration/serving split
    - dispatcher: validate -> execute -> tutor policy
    - tools: the built-in tools
"""

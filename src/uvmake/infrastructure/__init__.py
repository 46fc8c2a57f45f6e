"""Infrastructure layer: project filesystem state and external tool execution.

Provides the Project repository injected into every service.
"""

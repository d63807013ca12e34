# Role: Shared singletons for the HTTP layer. Routers import from here so tests can swap them.

from agent_core.core.responder import Responder

responder = Responder()

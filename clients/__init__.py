"""
clients/ - Data Access Layer
============================
One client per upstream HTTP API. Clients issue the request through the shared
ApiClient and return domain model objects.
This layer has no dependencies on services or handlers.
"""

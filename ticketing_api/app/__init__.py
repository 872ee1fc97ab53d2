"""
Application package for the Event Ticketing API.

``core`` holds configuration, logging, storage bootstrap, errors and
authentication; ``services`` the event lifecycle and its outbound
integrations; ``schemas`` the request and response models; and
``api`` the versioned routers.
"""

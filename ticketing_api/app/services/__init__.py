"""
Service layer.

Each service encapsulates the business logic or the outbound
integration for one concern, so API handlers stay thin.
"""

"""Host integrations: filesystem gateway, query dispatch and logging."""

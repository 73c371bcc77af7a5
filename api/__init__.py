"""DeliveryPilot HTTP service."""

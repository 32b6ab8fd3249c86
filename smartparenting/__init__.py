"""Registration and login service for the Smart Parenting app."""

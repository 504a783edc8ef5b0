"""
Shared, cross-cutting code for the API.

`core/` should contain small building blocks that multiple features use
(AirTable wiring, settings). Keep feature-specific field mapping and business
logic in the corresponding feature package (e.g. `items/`).
"""

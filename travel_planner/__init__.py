"""Travel planner backend: turns a city and a day count into a Gemini-generated itinerary card."""

__version__ = "0.1.0"

from app.schemas.travel import TripRequest

DEFAULT_TRAVELER_TYPE = "General"
DEFAULT_PREFERENCES = "General tourism"

_PROMPT_TEMPLATE = """\
You are an expert travel planner and local guide. Generate a detailed, day-by-day travel itinerary based on these inputs:

City: {city}
Budget: {budget} (per day or total, mention accordingly)
Number of Days: {days}
Traveler Type: {traveler_type}
Preferences: {preferences}

Create a structured daily itinerary for {days} days in {city}, optimized for the given budget {budget}.

Each day must include:
- Morning activity (with estimated cost & time)
- Afternoon activity (with estimated cost & time)
- Evening activity (with estimated cost & time)
- Dining recommendations (breakfast, lunch, dinner, and 1 unique local specialty, snack or café)
- Suggested transportation options
- Daily budget breakdown
- At least one hidden gem or local-only recommendation

Add maps or landmark references for clarity. Provide daily summaries (2-3 sentences) that capture the overall experience. Ensure budget tracking per day.

End with an overall summary of the trip, estimated total cost, and practical tips (safety, best local apps, cultural etiquette).

Format with clear headings and structure. Be friendly, engaging, and travel-magazine style."""


def build_itinerary_prompt(request: TripRequest) -> str:
    return _PROMPT_TEMPLATE.format(
        city=request.destination,
        budget=request.budget,
        days=request.days,
        traveler_type=request.traveler_type or DEFAULT_TRAVELER_TYPE,
        preferences=request.preferences or DEFAULT_PREFERENCES,
    )

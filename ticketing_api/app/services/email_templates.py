"""HTML bodies for outgoing notification emails."""

import html
from typing import Optional


def event_creation_email_template(user_name: Optional[str], event_name: Optional[str]) -> str:
    """Body of the "Your Event is Live!" email sent to an event's organizer."""
    user_name = html.escape(user_name or "there")
    event_name = html.escape(event_name or "your event")
    return f"""
    <div style="font-family: Arial, sans-serif; line-height: 1.6; color: #1f2937;">
      <h2>Your Event is Live!</h2>
      <p>Hi {user_name},</p>
      <p>
        Your event <strong>{event_name}</strong> has been created and is now
        visible to attendees.
      </p>
      <p>You can review or update it at any time from your dashboard.</p>
      <p>Thanks for organizing with us.</p>
    </div>
    """

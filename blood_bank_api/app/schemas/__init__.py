"""
Pydantic schema definitions for API payloads.

Schemas describe what travels over the wire.  They perform type
coercion only; the domain rules for donation entries live in
``services.validation`` so that every rejection carries its own
message.
"""

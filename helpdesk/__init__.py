"""Help center support agent for the blogging platform."""

"""Client, validation rules and shared dispatch core."""

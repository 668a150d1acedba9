"""emdocs: theme and static page builder for the Event Machine docs."""

__version__ = "0.1.0"

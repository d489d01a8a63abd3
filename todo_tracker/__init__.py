"""To-Do Tracker: a task list mirrored to a remote document collection."""

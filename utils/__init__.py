"""Generator selection and logging helpers."""

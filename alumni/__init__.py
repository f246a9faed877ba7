"""Alumni Connect backend: discussion thread voting, surveys and tags."""

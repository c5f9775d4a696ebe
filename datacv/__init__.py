"""DataCV core: sample-content resolution and document initialization."""

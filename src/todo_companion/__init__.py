"""todo-companion: a console chatbot that keeps your to-dos, deadlines and events."""

__version__ = "0.1.0"

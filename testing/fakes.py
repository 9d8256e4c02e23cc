from types import SimpleNamespace


class FakeCompletions:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return self.response


def fake_openai_client(content=None, finish_reason="stop", choices=None, error=None):
    if choices is None:
        message = SimpleNamespace(role="assistant", content=content)
        choices = [SimpleNamespace(message=message, finish_reason=finish_reason)]

    completions = FakeCompletions(
        response=SimpleNamespace(choices=choices),
        error=error,
    )
    return SimpleNamespace(chat=SimpleNamespace(completions=completions))


class ScriptedLLM:
    """Stands in for LLMAdapter; replays replies or raises errors in order."""

    def __init__(self, *replies):
        self.replies = list(replies)
        self.calls = []

    def generate(self, messages):
        self.calls.append(messages)
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply

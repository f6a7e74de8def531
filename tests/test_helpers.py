"""Shared test doubles and sample data."""

SAMPLE_LISTING = (
    "/gamemode <mode> [<target>]/gamerule <rule> [<value>]"
    "/time (add|query|set) <value>\n"
    "/weather (clear|rain|thunder) [<duration>]\n"
    "/difficulty [peaceful|easy|normal|hard]\n"
    "/teleport <target>\n"
    "/tp -> teleport\n"
    "/list\n"
)


class FakeClient:
    """Stand-in for RconClient that answers from a dict."""

    def __init__(self, responses=None, error=None):
        self.responses = dict(responses or {})
        self.error = error
        self.sent = []
        self.connected = True

    def send_command(self, command):
        self.sent.append(command)
        if self.error is not None:
            raise self.error
        return self.responses.get(command, "")

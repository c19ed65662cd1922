import os
import sys

import pandas as pd

from config import Config
from fbgraph.client import req, send
from fbgraph.errors import GraphClientError, MalformedErrorResponse
from fbgraph.params import StrParam
from fbgraph.resources.me import GraphResponseMe
from fbgraph.resources.pages import UserPagesList, list_user_pages_request
from fbgraph.response import read_response, read_response_fill


class GraphCliApp:
    """
    Command Line Interface (CLI) demonstrating requests to the Graph API.

    Usage:
        fbgraph <command> [access-token]

    Commands:
    - me: GET the user the token belongs to.
    - me-post: the same, sent as a POST with the "method=GET" override parameter.
    - pages: list the pages of the user as a table.

    The access token falls back to FB_ACCESS_TOKEN from the environment or a .env file.
    """

    def __init__(self, argv: list[str] | None = None):
        self.argv = sys.argv[1:] if argv is None else argv

        self.commands = {
            "me": self.me,
            "me-post": self.me_post,
            "pages": self.pages,
        }

        # Attempt to get terminal width for pretty printing
        try:
            self.terminal_width = os.get_terminal_size().columns
        except OSError:
            self.terminal_width = 70

    def print_error(self, message: str) -> None:
        print(f"\033[91mError: {message}\033[0m")

    def print_me(self, me: GraphResponseMe) -> None:
        if me.error is not None:
            self.print_error(me.error.user_message())
            return

        print("Request went through good!")
        print(f"id: {me.id}  name: {me.name}  email: {me.email}")

    def me(self, access_token: str) -> None:
        response = req("GET", "me", access_token)
        self.print_me(read_response(response, GraphResponseMe()))

    def me_post(self, access_token: str) -> None:
        response = req("POST", "me", access_token, None, StrParam("method", "GET"))
        self.print_me(read_response(response, GraphResponseMe()))

    def pages(self, access_token: str) -> None:
        pages = UserPagesList()
        response = send(list_user_pages_request(access_token))

        try:
            graph_error = read_response_fill(response, pages)

        except MalformedErrorResponse as e:
            self.print_error(e.error_response.message)
            return

        if graph_error is not None:
            self.print_error(graph_error.user_message())
            return

        df = pd.DataFrame(
            [{"id": p.id, "name": p.name, "category": p.category, "perms": ",".join(p.perms)} for p in pages.data]
        )

        print("─" * self.terminal_width)
        print(df.to_string(index=False) if not df.empty else "No pages")
        print("─" * self.terminal_width)

        if pages.paging.has_next():
            print(f"Next page: {pages.paging.next}")

    def run_app(self) -> int:
        """
        Routes the command line arguments to a command.

        Returns:
            int: Process exit status.
        """
        if not self.argv:
            self.print_error("Missing the command argument!")
            return 2

        command = self.argv[0]

        if command not in self.commands:
            self.print_error(f"The provided argument {command!r} does not map to a command.")
            return 2

        access_token = self.argv[1] if len(self.argv) > 1 else Config.FB_ACCESS_TOKEN

        if not access_token:
            self.print_error("Missing the access-token argument!")
            return 2

        try:
            self.commands[command](access_token)

        except MalformedErrorResponse as e:
            self.print_error(e.error_response.message or str(e))
            return 1

        except GraphClientError as e:
            self.print_error(str(e))
            return 1

        return 0


def main():
    """Entry point of the script."""
    app = GraphCliApp()
    sys.exit(app.run_app())


if __name__ == "__main__":
    main()

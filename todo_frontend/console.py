import argparse
import logging

from todo_frontend.api_client import TodoApiClient
from todo_frontend.config import ClientConfig
from todo_frontend.logging_setup import setup_logging
from todo_frontend.view import TodoView

logger = logging.getLogger(__name__)

HELP = """Commands:
  title <text>      set the form title
  desc <text>       set the form description
  add <title>       fill the title and submit in one step
  submit            add the task, or save changes while editing
  edit <n>          load task n into the form
  cancel            leave edit mode and clear the form
  delete <n>        delete task n
  alert <n>         set a reminder for task n (asks for date, time, phone)
  dismiss           close the current message
  refresh           reload the list
  help              show this text
  quit              exit"""


def _pick(view, arg):
    try:
        n = int(arg)
    except ValueError:
        n = 0
    if 1 <= n <= len(view.todos):
        return view.todos[n - 1]["id"]
    print(f"No task number {arg!r}")
    return None


def handle(view, line, prompt=input):
    """Apply one console command to ``view``. Returns False when the user quits."""
    cmd, _, arg = line.strip().partition(" ")
    cmd = cmd.lower()

    if cmd in ("quit", "exit"):
        return False
    if cmd == "help":
        print(HELP)
    elif cmd == "title":
        view.title = arg
    elif cmd == "desc":
        view.description = arg
    elif cmd == "add":
        view.title = arg
        view.submit()
    elif cmd == "submit":
        view.submit()
    elif cmd == "edit":
        todo_id = _pick(view, arg)
        if todo_id:
            view.start_edit(todo_id)
    elif cmd == "cancel":
        view.cancel_edit()
    elif cmd == "delete":
        todo_id = _pick(view, arg)
        if todo_id:
            view.delete(todo_id)
    elif cmd == "alert":
        todo_id = _pick(view, arg)
        if todo_id:
            view.open_alert(todo_id)
            try:
                date = prompt("Date (YYYY-MM-DD): ").strip()
                time_ = prompt("Time (HH:MM): ").strip()
                phone = prompt("Phone: ").strip()
            except (EOFError, KeyboardInterrupt):
                print()
                view.close_alert()
                return True
            if not view.set_alert(date, time_, phone):
                view.close_alert()
    elif cmd == "dismiss":
        view.dismiss()
    elif cmd == "refresh":
        view.refresh()
    elif cmd:
        print(f"Unknown command {cmd!r}; type help")
    return True


def run(view):
    view.load()
    print(view.render())
    while True:
        try:
            line = input("\n> ")
        except (EOFError, KeyboardInterrupt):
            print()
            break
        if not handle(view, line):
            break
        print(view.render())


def main(argv=None):
    parser = argparse.ArgumentParser(prog="todo-client", description="Console to-do list.")
    parser.add_argument("--api-url", default=ClientConfig.API_URL)
    parser.add_argument("--timeout", type=float, default=ClientConfig.API_TIMEOUT)
    args = parser.parse_args(argv)

    setup_logging(ClientConfig.LOG_LEVEL)
    logger.info("client starting", extra={"api_url": args.api_url})

    client = TodoApiClient(args.api_url, timeout=args.timeout)
    run(TodoView(client, message_seconds=ClientConfig.MESSAGE_SECONDS))

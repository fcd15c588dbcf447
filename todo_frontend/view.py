"""State of the single to-do page: the list, the shared form, reminders and notices."""

import logging
import time
from dataclasses import dataclass
from typing import Dict, List, Optional

from todo_frontend.api_client import ClientError

logger = logging.getLogger(__name__)


@dataclass
class Reminder:
    date: str
    time: str
    phone: str


@dataclass
class Notice:
    text: str
    is_error: bool
    shown_at: float


class TodoView:
    """
    Page model driven by user actions.

    The form is shared between adding and editing; ``selected_id`` decides
    which one a submit performs. Reminders live only in this object and are
    never sent to the API.
    """

    def __init__(self, client, message_seconds: float = 5.0, clock=time.monotonic):
        self.client = client
        self.message_seconds = message_seconds
        self.clock = clock

        self.todos: List[dict] = []
        self.title = ""
        self.description = ""
        self.selected_id: Optional[str] = None
        self.alert_target: Optional[str] = None
        self.reminders: Dict[str, Reminder] = {}
        self._notice: Optional[Notice] = None

    # -- notices -----------------------------------------------------------

    @property
    def notice(self) -> Optional[Notice]:
        if self._notice and self.clock() - self._notice.shown_at >= self.message_seconds:
            self._notice = None
        return self._notice

    def _success(self, text: str) -> None:
        self._notice = Notice(text, False, self.clock())

    def _error(self, text: str) -> None:
        self._notice = Notice(text, True, self.clock())

    def dismiss(self) -> None:
        self._notice = None

    # -- list ----------------------------------------------------------------

    @property
    def editing(self) -> bool:
        return self.selected_id is not None

    def load(self) -> None:
        """Initial fetch when the page is first shown."""
        self._fetch(fresh=False)

    def refresh(self) -> None:
        self._fetch(fresh=True)

    def _fetch(self, fresh: bool) -> None:
        try:
            self.todos = self.client.list_todos(fresh=fresh)
        except ClientError:
            logger.exception("Error fetching todos")
            self._error("Error loading tasks!")

    def find(self, todo_id: str) -> Optional[dict]:
        return next((t for t in self.todos if t["id"] == todo_id), None)

    # -- form ----------------------------------------------------------------

    def submit(self) -> None:
        if self.editing:
            self.save_edit()
        else:
            self.add_task()

    def _title_ok(self) -> bool:
        if not self.title.strip():
            self._error("Please enter a title!")
            return False
        return True

    def _clear_form(self) -> None:
        self.selected_id = None
        self.title = ""
        self.description = ""

    def add_task(self) -> None:
        if not self._title_ok():
            return
        try:
            created = self.client.create_todo(self.title, self.description or None)
        except ClientError:
            logger.exception("Error adding task")
            self._error("Error adding task!")
            return
        self.todos = self.todos + [created]
        self._clear_form()
        self._success("Task added successfully!")

    def start_edit(self, todo_id: str) -> None:
        todo = self.find(todo_id)
        if todo is None:
            return
        self.selected_id = todo_id
        self.title = todo["title"]
        self.description = todo.get("description") or ""

    def cancel_edit(self) -> None:
        self._clear_form()

    def save_edit(self) -> None:
        if not self._title_ok():
            return
        try:
            self.client.update_todo(self.selected_id, self.title, self.description or None)
        except ClientError:
            logger.exception("Error updating task")
            self._error("Error updating task!")
            return
        self._clear_form()
        self._success("Task updated successfully!")
        self.refresh()

    def delete(self, todo_id: str) -> None:
        try:
            self.client.delete_todo(todo_id)
        except ClientError:
            logger.exception("Error deleting task")
            self._error("Error deleting task!")
            return
        self._success("Task deleted successfully!")
        self.refresh()

    # -- reminder modal ------------------------------------------------------

    def open_alert(self, todo_id: str) -> None:
        self.alert_target = todo_id

    def close_alert(self) -> None:
        self.alert_target = None

    def set_alert(self, date: str, time_: str, phone: str) -> bool:
        if self.alert_target is None:
            return False
        if not date or not time_ or not phone:
            self._error("Please fill all fields before setting an alert!")
            return False
        self.reminders[self.alert_target] = Reminder(date, time_, phone)
        self._success(f"Alert set for {date} at {time_} (Phone: {phone})")
        self.alert_target = None
        return True

    # -- rendering -----------------------------------------------------------

    def render(self) -> str:
        lines = ["To-Do List", ""]
        notice = self.notice
        if notice:
            tag = "ERROR" if notice.is_error else "OK"
            lines += [f"[{tag}] {notice.text}  (dismiss to close)", ""]

        lines.append(f"Title:       {self.title}")
        lines.append(f"Description: {self.description}")
        lines.append("[Save Changes]" if self.editing else "[Add Task]")
        lines.append("")

        if not self.todos:
            lines.append("(no tasks)")
        for n, todo in enumerate(self.todos, 1):
            line = f"{n:>3}. {todo['title']}"
            if todo.get("description"):
                line += f" - {todo['description']}"
            if todo["id"] == self.selected_id:
                line += "  (editing)"
            lines.append(line)
            reminder = self.reminders.get(todo["id"])
            if reminder:
                lines.append(f"     Alert: {reminder.date} {reminder.time} Phone: {reminder.phone}")

        if self.alert_target is not None:
            todo = self.find(self.alert_target)
            lines += ["", f"Set alert for: {todo['title'] if todo else self.alert_target}"]
        return "\n".join(lines)

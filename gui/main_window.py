import tkinter as tk
from tkinter import ttk, messagebox as mb
from core.config import TOPMOST, UI_POLL_INTERVAL_MS, WINDOW_GEOMETRY
from core.exceptions import ValidationError
from core.models import Draft
from controller.app_controller import AppController
from gui.task_list import ScrollableTaskList
from gui.view_state import describe
from services.worker import UiDispatcher


class MainWindow(tk.Tk):
    def __init__(self, controller: AppController, dispatcher: UiDispatcher):
        super().__init__()
        self.controller = controller
        self.dispatcher = dispatcher
        self.title("Task Manager")
        self.geometry(WINDOW_GEOMETRY)
        self.configure(padx=8, pady=8)
        if TOPMOST:
            self.attributes("-topmost", True)
        self._shown_draft = Draft()
        self._render_pending = False

        # Top bar
        top = ttk.Frame(self)
        top.pack(fill="x", pady=(0, 6))
        ttk.Label(top, text="Task Manager", font=("TkDefaultFont", 14, "bold")).pack(side="left")
        ttk.Button(top, text="Refresh", command=self._on_refresh).pack(side="right")

        # Error banner
        self.error_var = tk.StringVar(value="")
        self.error_lbl = tk.Label(self, textvariable=self.error_var, fg="#B00020", anchor="w", justify="left")

        # Form
        self.form = ttk.LabelFrame(self, text="Add New Task", padding=6)
        self.form.pack(fill="x", pady=(0, 8))
        self.form.columnconfigure(0, weight=1)
        self.name_entry = ttk.Entry(self.form)
        self.name_entry.grid(row=0, column=0, sticky="we", pady=(0, 4))
        self.desc_text = tk.Text(self.form, height=3, wrap="word")
        self.desc_text.grid(row=1, column=0, sticky="we", pady=(0, 4))
        ttk.Button(self.form, text="Add Task", command=self._on_submit).grid(row=2, column=0, sticky="e")
        self.name_entry.bind("<Return>", self._on_submit)

        # Task list
        self.heading_var = tk.StringVar(value="Tasks (0)")
        ttk.Label(self, textvariable=self.heading_var, font=("TkDefaultFont", 12, "bold")).pack(anchor="w")
        self.body = ttk.Frame(self)
        self.body.pack(fill="both", expand=True)
        self.message_var = tk.StringVar(value="")
        self.message_lbl = ttk.Label(self.body, textvariable=self.message_var, anchor="center")
        self.task_list = ScrollableTaskList(self.body, on_toggle=self._on_toggle, on_delete=self._on_delete)

        # listeners / binds
        self.controller.subscribe(self._on_state_change)
        self.bind("<F5>", lambda e: self._on_refresh())
        self.after(UI_POLL_INTERVAL_MS, self._poll)

        self._render()
        self.controller.refresh()

    # ---------- state -> widgets ----------
    def _on_state_change(self, _state):
        # May run on a worker thread; hand off to the Tk thread.
        self.dispatcher.post(self._schedule_render)

    def _schedule_render(self):
        self._render_pending = True

    def _poll(self):
        try:
            self.dispatcher.drain()
            if self._render_pending:
                self._render_pending = False
                self._render()
        finally:
            self.after(UI_POLL_INTERVAL_MS, self._poll)

    def _render(self):
        state = self.controller.state
        view = describe(state)

        if view.error:
            self.error_var.set(view.error)
            self.error_lbl.pack(fill="x", pady=(0, 6), before=self.form)
        else:
            self.error_lbl.pack_forget()

        if state.draft != self._shown_draft:
            self._shown_draft = state.draft
            self._set_form(state.draft)

        self.heading_var.set(view.heading)
        if view.mode == "list":
            self.message_lbl.pack_forget()
            self.task_list.pack(fill="both", expand=True)
            self.task_list.set_tasks(view.rows)
        else:
            self.task_list.pack_forget()
            self.message_var.set(view.message or "")
            self.message_lbl.pack(fill="both", expand=True, pady=20)

    def _set_form(self, draft: Draft):
        self.name_entry.delete(0, "end")
        self.name_entry.insert(0, draft.name)
        self.desc_text.delete("1.0", "end")
        self.desc_text.insert("1.0", draft.description)

    def _read_form(self) -> Draft:
        return Draft(name=self.name_entry.get(), description=self.desc_text.get("1.0", "end-1c"))

    # ---------- actions ----------
    def _on_refresh(self):
        self.controller.refresh()

    def _on_submit(self, event=None):
        draft = self._read_form()
        try:
            self.controller.submit(draft)
        except ValidationError as e:
            mb.showwarning("Add Task", str(e), parent=self)
            return
        # the form already shows what was submitted
        self._shown_draft = draft

    def _on_toggle(self, task_id: str):
        self.controller.toggle(task_id)

    def _on_delete(self, task_id: str):
        self.controller.delete(task_id, confirm=lambda msg: mb.askyesno("Delete Task", msg, parent=self))

"""
Scrollable Task List widget for Tkinter
--------------------------------------
Renders each task as its own row (a Frame) inside a scrollable Canvas, with:
- a Checkbutton mirroring the `completed` flag
- the task name, its description and creation date
- a Complete/Undo button and a Delete button

Integration notes:
- The widget is view-only state. Clicks are forwarded to the callbacks given
  in the constructor; the controller decides what happens and the window
  calls `set_tasks()` again with the re-fetched list.
- Use `set_tasks()` with the row dicts produced by `gui.view_state.describe`.
- Bind to virtual events if you prefer: <<TaskToggle>>, <<TaskDelete>>
"""
from __future__ import annotations
from typing import Callable, Dict, List, Optional, Tuple
import tkinter as tk
from tkinter import ttk


class TaskRow(ttk.Frame):
    """A single task row with checkbox, name, description/date and action buttons."""
    def __init__(
        self,
        master,
        task_id: str,
        text: str,
        description: str = "",
        date: str = "",
        done: bool = False,
        on_toggle: Optional[Callable[[str], None]] = None,
        on_delete: Optional[Callable[[str], None]] = None,
        wrap: int = 400,
    ):
        super().__init__(master, padding=(0, 2))
        self.task_id = task_id
        self._on_toggle = on_toggle
        self._on_delete = on_delete
        self.var = tk.BooleanVar(value=done)

        self.columnconfigure(1, weight=1)

        self.chk = ttk.Checkbutton(self, variable=self.var, command=self._toggle)
        self.chk.grid(row=0, column=0, rowspan=2, padx=(8, 6), pady=4, sticky="nw")

        self.lbl = ttk.Label(self, text=text, wraplength=wrap, anchor="w", justify="left")
        self.lbl.grid(row=0, column=1, sticky="we")

        self.desc = ttk.Label(self, text=description, wraplength=wrap, anchor="w", justify="left",
                              style="Task.Desc.TLabel")
        self.desc.grid(row=1, column=1, sticky="we")

        self.date_lbl = ttk.Label(self, text=date, style="Task.Date.TLabel")
        self.date_lbl.grid(row=2, column=1, sticky="w", pady=(0, 4))

        self.toggle_btn = ttk.Button(self, width=9, command=self._toggle)
        self.toggle_btn.grid(row=0, column=2, padx=(6, 4))
        self.delete_btn = ttk.Button(self, text="Delete", width=7, command=self._delete)
        self.delete_btn.grid(row=0, column=3, padx=(0, 8))

        self._apply_done_style(done)

    # --- Internals ---
    def _apply_done_style(self, done: bool):
        self.lbl.configure(style="Task.Done.TLabel" if done else "Task.Normal.TLabel")
        self.toggle_btn.configure(text="Undo" if done else "Complete")

    def _toggle(self):
        # The checkbox reflects server state only; put it back until the re-fetch lands.
        self.var.set(self.toggle_btn.cget("text") == "Undo")
        # callbacks may open a dialog whose event loop re-renders and destroys this row
        self.event_generate("<<TaskToggle>>", when="tail")
        if self._on_toggle:
            self._on_toggle(self.task_id)

    def _delete(self):
        self.event_generate("<<TaskDelete>>", when="tail")
        if self._on_delete:
            self._on_delete(self.task_id)


class ScrollableTaskList(ttk.Frame):
    """Canvas + interior Frame pattern with mousewheel support."""
    def __init__(
        self,
        master,
        on_toggle: Optional[Callable[[str], None]] = None,
        on_delete: Optional[Callable[[str], None]] = None,
        row_wrap: int = 400,
        row_padding: Tuple[int, int] = (2, 2),
        **kwargs,
    ):
        super().__init__(master, **kwargs)
        self._on_toggle = on_toggle
        self._on_delete = on_delete
        self._row_wrap = row_wrap
        self._row_padding = row_padding
        self._rows: Dict[str, TaskRow] = {}

        # --- styles ---
        style = ttk.Style(self)
        style.configure("Task.Normal.TLabel", font=("TkDefaultFont", 10, "bold"))
        style.configure("Task.Done.TLabel", font=("TkDefaultFont", 10, "overstrike"), foreground="#888888")
        style.configure("Task.Desc.TLabel")
        style.configure("Task.Date.TLabel", foreground="#888888")

        # --- layout ---
        self.canvas = tk.Canvas(self, highlightthickness=0)
        self.vbar = ttk.Scrollbar(self, orient="vertical", command=self.canvas.yview)
        self.canvas.configure(yscrollcommand=self.vbar.set)

        self.canvas.grid(row=0, column=0, sticky="nsew")
        self.vbar.grid(row=0, column=1, sticky="ns")
        self.rowconfigure(0, weight=1)
        self.columnconfigure(0, weight=1)

        self.interior = ttk.Frame(self.canvas)
        self.interior.columnconfigure(0, weight=1)
        self._win_id = self.canvas.create_window(0, 0, window=self.interior, anchor="nw")

        self.interior.bind("<Configure>", self._on_interior_configure)
        self.canvas.bind("<Configure>", self._on_canvas_configure)

        self._bind_mousewheel(self.canvas)

    # --- Public API ---
    def set_tasks(self, tasks: List[Dict]):
        """Replace all rows. Each dict: {'id', 'text', 'description', 'date', 'done'}."""
        for row in list(self._rows.values()):
            row.destroy()
        self._rows.clear()

        for i, task in enumerate(tasks):
            row = TaskRow(
                self.interior,
                task_id=task["id"],
                text=task.get("text", ""),
                description=task.get("description", ""),
                date=task.get("date", ""),
                done=task.get("done", False),
                on_toggle=self._on_toggle,
                on_delete=self._on_delete,
                wrap=self._row_wrap,
            )
            row.grid(row=i, column=0, sticky="we", padx=(8, 8), pady=self._row_padding)
            self._rows[task["id"]] = row

        self._update_scrollregion()

    # --- Internals ---
    def _update_scrollregion(self):
        self.update_idletasks()
        self.canvas.configure(scrollregion=self.canvas.bbox("all"))

    def _on_interior_configure(self, _):
        self._update_scrollregion()

    def _on_canvas_configure(self, event):
        self.canvas.itemconfigure(self._win_id, width=event.width)
        wrap = max(event.width - 220, 120)  # room for checkbox and buttons
        for row in self._rows.values():
            row.lbl.configure(wraplength=wrap)
            row.desc.configure(wraplength=wrap)

    # Mousewheel helpers
    def _bind_mousewheel(self, widget):
        widget.bind_all("<MouseWheel>", self._on_mousewheel_windows_mac, add="+")
        widget.bind_all("<Button-4>", self._on_mousewheel_linux, add="+")
        widget.bind_all("<Button-5>", self._on_mousewheel_linux, add="+")

    def _on_mousewheel_windows_mac(self, event):
        # Windows reports +/-120 per notch
        delta = int(-1 * (event.delta / 120))
        self.canvas.yview_scroll(delta, "units")

    def _on_mousewheel_linux(self, event):
        if event.num == 4:
            self.canvas.yview_scroll(-1, "units")
        elif event.num == 5:
            self.canvas.yview_scroll(1, "units")

"""Interface-level constants for the todo CLI/TUI."""

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M %z"
INDENT = "    "
SEPARATOR = "<--->"

HELP = """todo — two-panel terminal task manager with nested subtasks

Normal mode:
  up/k, down/j       move cursor          g / G / h     top / bottom / half
  K, J               drag item (with its subtasks) among its siblings
  tab                switch TODO/DONE     s             show/hide subtasks
  enter / space      mark subtask done, or move a task between TODO and DONE
  i                  insert a task above   a            append a subtask
  e                  edit item             d            delete item
  u                  undo                  q / esc      save and quit
Editing mode:
  enter commit · esc cancel · left/right/home/end move · backspace/delete erase
"""

LANG_PACK = {
    "en": {
        "STATUS_LOADED": "Loaded '{path}' file.",
        "STATUS_NEW_FILE": "File '{path}' not found. Creating new one.",
        "STATUS_SAVED": "Saved '{path}'.",
        "STATUS_WHAT_TO_DO": "What needs to be done?",
        "STATUS_WHAT_SUBTASK": "Add a subtask.",
        "STATUS_EDITING": "Editing current item.",
        "STATUS_DONE": "Done! Great job!",
        "STATUS_NOT_DONE": "Not done yet? Keep going!",
        "STATUS_SUBTASK_DONE": "Subtask done.",
        "STATUS_SUBTASK_REOPENED": "Subtask reopened.",
        "STATUS_DELETED": "Item deleted.",
        "STATUS_UNDO": "Undo: {action}",
        "STATUS_SUBTASKS_HIDDEN": "Subtasks hidden.",
        "STATUS_SUBTASKS_SHOWN": "Subtasks shown.",
        "ACTION_INSERT": "Insert",
        "ACTION_APPEND": "Append",
        "ACTION_EDIT": "Edit",
        "ACTION_DELETE": "Delete",
        "ACTION_DRAG_UP": "Drag up",
        "ACTION_DRAG_DOWN": "Drag down",
        "ACTION_MARK": "Mark",
        "ACTION_TRANSFER": "Transfer",
        "ERR_GENERIC": "Operation failed.",
        "ERR_ALREADY_AT_TOP": "Can't drag up. Item is already at the top.",
        "ERR_ALREADY_AT_BOTTOM": "Can't drag down. Item is already at the bottom.",
        "ERR_CANNOT_LEAVE_PARENT": "A subtask can only move among its own siblings.",
        "ERR_CANNOT_INSERT": "Can't insert a task inside another task's subtasks.",
        "ERR_CANNOT_DELETE": "Delete policy '{policy}' does not allow removing this item.",
        "ERR_HAS_ACTIVE_SUBTASKS": "Item still has {count} unfinished subtask(s).",
        "ERR_STILL_ACTIVE": "Task still has {count} unfinished subtask(s).",
        "ERR_NOT_A_ROOT": "Only whole tasks can move between TODO and DONE.",
        "ERR_NOTHING_TO_UNDO": "Nothing to undo.",
        "ERR_EMPTY_LIST": "List is empty.",
        "ERR_EMPTY_TEXT": "Item can't be empty.",
        "ERR_COMPLETED_READ_ONLY": "Only new TODO items can be added.",
        "PANEL_ACTIVE": "TODO",
        "PANEL_COMPLETED": "DONE",
        "PANEL_EMPTY": "(empty)",
        "MODE_NORMAL": "NORMAL",
        "MODE_EDITING": "EDIT",
        "FOOTER_NORMAL": "i insert · a subtask · e edit · enter done · d delete · K/J drag · u undo · tab panel · q quit",
        "FOOTER_EDITING": "enter commit · esc cancel",
        "HIDDEN_SUBTASKS": "+{count}",
    },
    "ru": {
        "STATUS_LOADED": "Загружен файл '{path}'.",
        "STATUS_NEW_FILE": "Файл '{path}' не найден. Будет создан новый.",
        "STATUS_SAVED": "Сохранено в '{path}'.",
        "STATUS_WHAT_TO_DO": "Что нужно сделать?",
        "STATUS_WHAT_SUBTASK": "Добавьте подзадачу.",
        "STATUS_EDITING": "Редактирование элемента.",
        "STATUS_DONE": "Готово! Отличная работа!",
        "STATUS_NOT_DONE": "Ещё не готово? Продолжайте!",
        "STATUS_SUBTASK_DONE": "Подзадача выполнена.",
        "STATUS_SUBTASK_REOPENED": "Подзадача снова открыта.",
        "STATUS_DELETED": "Элемент удалён.",
        "STATUS_UNDO": "Отменено: {action}",
        "STATUS_SUBTASKS_HIDDEN": "Подзадачи скрыты.",
        "STATUS_SUBTASKS_SHOWN": "Подзадачи показаны.",
        "ACTION_INSERT": "Вставка",
        "ACTION_APPEND": "Подзадача",
        "ACTION_EDIT": "Правка",
        "ACTION_DELETE": "Удаление",
        "ACTION_DRAG_UP": "Сдвиг вверх",
        "ACTION_DRAG_DOWN": "Сдвиг вниз",
        "ACTION_MARK": "Отметка",
        "ACTION_TRANSFER": "Перенос",
        "ERR_ALREADY_AT_TOP": "Нельзя сдвинуть вверх: элемент уже первый.",
        "ERR_ALREADY_AT_BOTTOM": "Нельзя сдвинуть вниз: элемент уже последний.",
        "ERR_CANNOT_LEAVE_PARENT": "Подзадача перемещается только среди своих соседей.",
        "ERR_CANNOT_INSERT": "Нельзя вставить задачу внутрь подзадач другой задачи.",
        "ERR_CANNOT_DELETE": "Политика удаления '{policy}' не разрешает удалить этот элемент.",
        "ERR_HAS_ACTIVE_SUBTASKS": "Незавершённых подзадач: {count}.",
        "ERR_STILL_ACTIVE": "У задачи есть незавершённые подзадачи: {count}.",
        "ERR_NOT_A_ROOT": "Между TODO и DONE переносятся только задачи целиком.",
        "ERR_NOTHING_TO_UNDO": "Нечего отменять.",
        "ERR_EMPTY_LIST": "Список пуст.",
        "ERR_EMPTY_TEXT": "Элемент не может быть пустым.",
        "ERR_COMPLETED_READ_ONLY": "Добавлять можно только новые TODO.",
        "PANEL_EMPTY": "(пусто)",
        "MODE_NORMAL": "ОБЫЧНЫЙ",
        "MODE_EDITING": "ПРАВКА",
        "FOOTER_NORMAL": "i вставка · a подзадача · e правка · enter готово · d удалить · K/J сдвиг · u отмена · tab панель · q выход",
        "FOOTER_EDITING": "enter сохранить · esc отмена",
    },
}

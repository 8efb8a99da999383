"""
Page model.

- document.py: minimal element tree (the page the app renders into)
- render.py: projects the todo list into #todoList
- dialog.py: Yes/No overlay with callback delivery
"""

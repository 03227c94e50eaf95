from typing import Any, List, Optional

from core.editor import EditorForm
from core.models import CATEGORIES
from core.store import AppState
from views.base import View
from views.layout import esc, render_page

FIELD_LABELS = {
    "title": "Title",
    "author": "Author Name",
    "category": "Category",
    "content": "Content",
}


class EditorView(View):
    def _errors(self, errors: List[str]) -> str:
        if not errors:
            return ""
        items = []
        for e in errors:
            label = esc(FIELD_LABELS.get(e, e))
            if e == "category":
                items.append(f"<li>{label} must be one of the listed choices.</li>")
            else:
                items.append(f"<li>{label} is required.</li>")
        return f'<ul class="form-errors">{"".join(items)}</ul>'

    def _category_select(self, current: str) -> str:
        opts = []
        for c in CATEGORIES:
            sel = " selected" if c == current else ""
            opts.append(f'<option value="{esc(c)}"{sel}>{esc(c)}</option>')
        return f'<select name="category" id="category">{"".join(opts)}</select>'

    def _submit(self, busy: bool) -> str:
        if busy:
            return ('<button type="submit" class="publish" disabled>'
                    '<span class="spinner"></span><span>Saving...</span></button>')
        return '<button type="submit" class="publish">Publish Article</button>'

    def render_body(self, state: AppState, form: EditorForm, errors: Optional[List[str]] = None) -> str:
        return (
            '<div class="editor">'
            '<div class="editor-head"><h2>New Article</h2>'
            '<a class="cancel" href="/" aria-label="Cancel">&times;</a></div>'
            + self._errors(errors or [])
            + '<form method="post" action="/admin" onsubmit="'
            "var b=this.querySelector('button.publish');"
            "b.disabled=true;b.textContent='Saving...';\">"
            '<label for="title">Title</label>'
            f'<input required name="title" id="title" value="{esc(form.title)}" '
            'placeholder="e.g. This week\'s English conversation tips">'
            '<label for="author">Author Name</label>'
            f'<input required name="author" id="author" value="{esc(form.author)}" placeholder="e.g. Kairi">'
            '<label for="category">Category</label>'
            + self._category_select(form.category)
            + '<label for="content">Content</label>'
            f'<textarea required name="content" id="content" rows="10" '
            f'placeholder="Write the article here...">{esc(form.content)}</textarea>'
            '<label for="image">Image URL (Optional)</label>'
            f'<input name="image" id="image" value="{esc(form.image)}" placeholder="https://...">'
            '<label for="tags">Tags (Comma separated)</label>'
            f'<input name="tags" id="tags" value="{esc(form.tags)}" placeholder="English, Events, Beginner">'
            + self._submit(state.loading or state.creating)
            + "</form></div>"
        )

    def render(self, state: AppState, **kwargs: Any) -> str:
        form = kwargs.get("form") or EditorForm()
        errors = kwargs.get("errors")
        return render_page(state, self.render_body(state, form, errors), title="New Article")

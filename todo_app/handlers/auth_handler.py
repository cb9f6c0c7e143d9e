from mangum import Mangum

from todo_app.main import create_app

app = create_app("Auth Lambda", include_todos=False)

handler = Mangum(app)

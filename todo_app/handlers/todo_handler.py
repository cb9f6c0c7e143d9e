from mangum import Mangum

from todo_app.main import create_app

app = create_app("Todo Lambda", include_auth=False)

handler = Mangum(app)

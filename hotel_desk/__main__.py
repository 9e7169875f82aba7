from hotel_desk.app.cli import app

app(prog_name="hotel-desk")

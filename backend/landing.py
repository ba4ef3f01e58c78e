from pathlib import Path

from fastapi import Request
from fastapi.templating import Jinja2Templates

from waitlist_form import WaitlistForm

templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))

FEATURES = [
    {
        "name": "AI-Powered Analysis",
        "description": "Our advanced AI algorithms analyze customer reviews to extract meaningful insights and trends.",
    },
    {
        "name": "Real-time Monitoring",
        "description": "Track your restaurant's reputation across all major review platforms in real-time.",
    },
    {
        "name": "Smart Recommendations",
        "description": "Get actionable recommendations to improve your restaurant's performance based on customer feedback.",
    },
]


def render_landing(request: Request, form: WaitlistForm):
    return templates.TemplateResponse(
        request,
        "landing.html",
        {"features": FEATURES, "form": form},
    )

"""Login page -- sign in / create account screen (UI only)."""
import asyncio

from nicegui import ui

from config import APP_TITLE
from src.services.auth_form import MIN_PASSWORD_LENGTH, LoginForm


def login_page():
    """Render the sign-in screen."""
    form = LoginForm()

    ui.colors(primary="#EA580C", secondary="#64748B", accent="#F97316")

    with ui.row().classes("w-full min-h-screen no-wrap gap-0"):
        # Branding panel
        with ui.column().classes(
            "flex-1 bg-grey-10 text-white items-center justify-center p-12 gt-sm"
        ):
            with ui.column().classes("max-w-md gap-6"):
                ui.icon("dataset").classes("text-5xl text-primary")
                ui.label("Manage your Business Logic.").classes("text-h4 font-bold")
                ui.label(
                    f"Cashiers and managers use {APP_TITLE} to streamline daily billing, "
                    "track inventory, and secure payments."
                ).classes("text-body1 text-grey-5")
                with ui.row().classes("items-center gap-3 p-4 rounded-lg bg-white/10"):
                    ui.icon("verified_user").classes("text-primary")
                    with ui.column().classes("gap-0"):
                        ui.label("Secure Access").classes("text-subtitle2 font-bold")
                        ui.label("Role-based access for every counter.").classes(
                            "text-caption text-grey-5"
                        )

        # Form panel
        with ui.column().classes("flex-1 items-center justify-center p-8 bg-grey-1"):

            @ui.refreshable
            def form_card():
                is_register = form.mode == "register"
                with ui.card().classes("w-full max-w-sm p-6 gap-3"):
                    ui.label("Create account" if is_register else "Welcome back").classes(
                        "text-h6 font-bold"
                    )
                    ui.label(
                        "Fill in your details to get started."
                        if is_register else "Sign in to continue to your dashboard."
                    ).classes("text-body2 text-secondary")

                    if is_register:
                        ui.input(
                            "Full name", value=form.full_name,
                            on_change=lambda e: _set("full_name", e.value),
                        ).props("outlined dense").classes("w-full")
                    ui.input(
                        "Email", value=form.email,
                        on_change=lambda e: _set("email", e.value),
                    ).props("outlined dense type=email").classes("w-full")
                    ui.input(
                        "Password", value=form.password,
                        password=True, password_toggle_button=True,
                        on_change=lambda e: _set("password", e.value),
                    ).props("outlined dense").classes("w-full").tooltip(
                        f"At least {MIN_PASSWORD_LENGTH} characters"
                    )

                    submit_btn = ui.button(
                        "Create account" if is_register else "Sign in",
                        on_click=_submit,
                    ).props("color=primary").classes("w-full")
                    submit_btn.set_enabled(form.can_submit)
                    submit_state["button"] = submit_btn
                    if form.loading:
                        submit_btn.props("loading")

                    with ui.row().classes("w-full justify-center gap-1"):
                        ui.label(
                            "Already have an account?" if is_register else "New here?"
                        ).classes("text-caption text-secondary")
                        ui.link(
                            "Sign in" if is_register else "Create an account",
                        ).classes("text-caption text-primary cursor-pointer").on(
                            "click", lambda: _switch("login" if is_register else "register"),
                        )

            submit_state = {"button": None}

            def _set(field: str, value):
                setattr(form, field, value or "")
                btn = submit_state["button"]
                if btn is not None:
                    btn.set_enabled(form.can_submit)

            def _switch(mode: str):
                form.switch_mode(mode)
                form_card.refresh()

            async def _submit():
                if not form.can_submit:
                    return
                form.loading = True
                form_card.refresh()
                await asyncio.sleep(0.9)
                form.loading = False
                try:
                    form_card.refresh()
                except RuntimeError:
                    pass  # User navigated away

            form_card()

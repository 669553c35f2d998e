# ABOUTME: Main NiceGUI web application entry point
# ABOUTME: Conditions form, live weather, wind arrow, disc bag, and ranked recommendations

import asyncio
import logging

from nicegui import ui, Client

from discwind.config import Config
from discwind.discs.models import STABILITY_LADDER, Disc
from discwind.orchestrator import AppOrchestrator
from discwind.scoring.calculator import QUICK_PRESETS
from discwind.ui.wind_arrow import WindArrowGraph
from discwind.weather.models import CompassDirection, FlightCondition, RelativeWind

log = logging.getLogger(__name__)

# Initialize orchestrator
orchestrator = AppOrchestrator(api_key=Config.OPENWEATHER_API_KEY)
wind_arrow = WindArrowGraph(size=120)

STABILITY_COLORS = {
    "Very Understable": "#cce0ff",
    "Understable": "#cce0ff",
    "Stable": "#d6f5d6",
    "Overstable": "#ffe0b3",
    "Very Overstable": "#ffc2c2",
}


@ui.page('/')
async def index(client: Client):
    """Main page"""

    ui.add_head_html("""
    <style>
        body {
            background-color: #FFFFFF;
            color: #000000;
            font-family: Arial, sans-serif;
        }
        .title {
            font-size: clamp(22px, 5vw, 40px);
            font-weight: bold;
            margin-top: 2vh;
            text-align: center;
        }
        .quick-card {
            border: 1px solid #ddd;
            border-radius: 12px;
            padding: 12px;
            max-width: 480px;
        }
        .explanation {
            font-size: clamp(13px, 3vw, 16px);
            max-width: 90vw;
            text-align: center;
            line-height: 1.5;
        }
        .disc-row {
            font-size: clamp(12px, 3vw, 16px);
            margin: 0.5vh 0;
        }

        /* Loading overlay */
        #loading-overlay {
            position: fixed;
            top: 0;
            left: 0;
            width: 100%;
            height: 100%;
            background: white;
            display: flex;
            justify-content: center;
            align-items: center;
            z-index: 9999;
            transition: opacity 0.5s ease-out;
        }

        #loading-overlay.fade-out {
            opacity: 0;
            pointer-events: none;
        }

        #loading-text {
            font-family: monospace;
            font-size: 24px;
            color: #333;
            animation: pulse 1.5s ease-in-out infinite;
        }

        @keyframes pulse {
            0%, 100% { opacity: 0.3; }
            50% { opacity: 1; }
        }
    </style>
    """)

    # Loading overlay - shown until the first dashboard is rendered
    ui.html('<div id="loading-overlay"><span id="loading-text">LOADING</span></div>', sanitize=False)

    with ui.column().classes('w-full items-center'):
        ui.html('<div class="title">DISC WIND CADDIE</div>', sanitize=False)

        # Quick conditions card
        with ui.element('div').classes('quick-card'):
            impact_label = ui.label('--')
            summary_label = ui.label('--')
            wind_label = ui.label('--')
            top_pick_label = ui.label('Smart Throw: --').style('font-weight: bold;')

        arrow_html = ui.html('', sanitize=False)
        explanation_label = ui.html('<div class="explanation">--</div>', sanitize=False)

        # Conditions form
        with ui.row().classes('items-end'):
            throw_select = ui.select(
                [d.value for d in CompassDirection],
                value=orchestrator.throw_direction,
                label='Throw direction'
            )
            wind_dir_select = ui.select(
                [r.value for r in RelativeWind],
                value=orchestrator.conditions.wind_direction,
                label='Wind'
            )
            wind_speed_input = ui.number('Wind (mph)', value=orchestrator.conditions.wind_speed, min=0, max=40)
            temperature_input = ui.number('Temp (°F)', value=orchestrator.conditions.temperature)
            elevation_input = ui.number('Elevation (ft)', value=orchestrator.conditions.elevation)
            humidity_input = ui.number('Humidity (%)', value=orchestrator.conditions.humidity, min=0, max=100)

        # Live weather and compass heading
        with ui.row().classes('items-end'):
            lat_input = ui.number('Latitude', format='%.4f')
            lon_input = ui.number('Longitude', format='%.4f')
            ui.button('USE LOCATION', on_click=lambda: use_coordinates())
            city_input = ui.input('City')
            ui.button('USE CITY', on_click=lambda: use_city())
            heading_input = ui.number('Heading (°)', min=0, max=359)

        with ui.row():
            for preset in QUICK_PRESETS:
                ui.button(preset.upper(), on_click=lambda p=preset: apply_preset(p))
        courses_row = ui.row()
        with ui.row().classes('items-end'):
            course_name_input = ui.input('Course name')
            ui.button('SAVE AS COURSE', on_click=lambda: save_course())

        ui.label('--- RECOMMENDED DISCS ---').style('font-weight: bold; margin-top: 2vh;')
        recommendations_column = ui.column()

        status_label = ui.label('').style('font-size: 12px; color: #666;')

        # Disc manager
        ui.label('--- MY DISCS ---').style('font-weight: bold; margin-top: 2vh;')
        search_input = ui.input('Search discs', on_change=lambda _: render_bag())
        bag_column = ui.column()
        with ui.row().classes('items-end'):
            new_name_input = ui.input('Name')
            new_brand_input = ui.input('Brand')
            new_speed_input = ui.number('Speed', value=7, min=1, max=14)
            new_glide_input = ui.number('Glide', value=5, min=1, max=7)
            new_turn_input = ui.number('Turn', value=0, min=-5, max=1)
            new_fade_input = ui.number('Fade', value=2, min=0, max=5)
            new_stability_select = ui.select(
                [s.value for s in STABILITY_LADDER],
                value='Stable',
                label='Stability'
            )
            ui.button('ADD DISC', on_click=lambda: add_disc())

        syncing = False

        def sync_form():
            """Push current conditions into the form without re-triggering updates."""
            nonlocal syncing
            conditions = orchestrator.conditions
            syncing = True
            try:
                for widget, value in (
                    (throw_select, orchestrator.throw_direction),
                    (wind_dir_select, conditions.wind_direction),
                    (wind_speed_input, conditions.wind_speed),
                    (temperature_input, conditions.temperature),
                    (elevation_input, conditions.elevation),
                    (humidity_input, conditions.humidity),
                ):
                    widget.set_value(value)
            finally:
                syncing = False

        def update_display():
            """Render the dashboard for the current conditions"""
            try:
                data = orchestrator.get_dashboard()
                conditions = data["conditions"]

                impact_label.text = f"{data['impact'].label} (density altitude {data['density_altitude']:.0f} ft)"
                impact_label.style(f"color: {data['impact'].color};")
                summary_label.text = str(conditions)
                wind_label.text = str(data["wind"])
                wind_label.style(f"color: {orchestrator.calculator.wind_severity_color(conditions.wind_speed)};")
                top_pick_label.text = f"Smart Throw: {data['top_pick']}"

                arrow_html.content = wind_arrow.render(
                    conditions.wind_direction, data["throw_direction"], conditions.wind_speed
                )
                explanation_label.content = f'<div class="explanation">{data["explanation"]}</div>'

                recommendations_column.clear()
                with recommendations_column:
                    for item in data["recommendations"]:
                        disc = item.disc
                        color = STABILITY_COLORS.get(str(disc.stability), "#eee")
                        ui.html(
                            f'<div class="disc-row"><b>{disc.name}</b> ({disc.brand}) '
                            f'{disc.flight_numbers} '
                            f'<span style="background: {color}; padding: 2px 6px;">{disc.stability}</span> '
                            f'score {item.score}</div>',
                            sanitize=False
                        )

                if data["is_offline"]:
                    status_label.text = f"Live weather unavailable: {data['error']}"
                elif data["is_using_live_data"] and data["reading"]:
                    status_label.text = f"Live weather: {data['reading']}"
                else:
                    status_label.text = "Manual conditions"

            except Exception as e:
                log.exception(f"UI update error: {e}")
                explanation_label.content = '<div class="explanation">Something broke. Try refreshing the page.</div>'

        def on_form_change():
            if syncing:
                return
            orchestrator.set_throw_direction(throw_select.value)
            orchestrator.set_conditions(FlightCondition(
                wind_speed=float(wind_speed_input.value or 0),
                wind_direction=wind_dir_select.value,
                temperature=float(temperature_input.value or 0),
                elevation=float(elevation_input.value or 0),
                humidity=float(humidity_input.value or 0),
            ))
            update_display()

        def apply_preset(preset: str):
            orchestrator.apply_quick_preset(preset)
            sync_form()
            update_display()

        def apply_course(course):
            orchestrator.apply_course_preset(course)
            sync_form()
            update_display()

        def render_courses():
            courses_row.clear()
            with courses_row:
                for course in orchestrator.presets.saved_courses:
                    ui.button(course.name, on_click=lambda c=course: apply_course(c))

        def save_course():
            name = (course_name_input.value or '').strip()
            if not name:
                ui.notify('Give the course a name first')
                return
            orchestrator.save_current_as_course(name)
            course_name_input.set_value('')
            render_courses()

        async def use_coordinates():
            if lat_input.value is None or lon_input.value is None:
                ui.notify('Enter both latitude and longitude')
                return
            latitude, longitude = float(lat_input.value), float(lon_input.value)
            await asyncio.get_event_loop().run_in_executor(
                None, orchestrator.use_coordinates, latitude, longitude
            )
            sync_form()
            update_display()

        def use_city():
            city = (city_input.value or '').strip()
            if not city:
                ui.notify('Enter a city')
                return
            orchestrator.simulate_weather_for_city(city)
            sync_form()
            update_display()

        def on_heading_change():
            if heading_input.value is None:
                return
            orchestrator.set_heading(float(heading_input.value))
            sync_form()
            update_display()

        def render_bag():
            """List the bag (filtered by the search box) with per-disc actions"""
            bag_column.clear()
            with bag_column:
                for disc in orchestrator.inventory.search(search_input.value or ''):
                    with ui.row().classes('items-center'):
                        ui.label(str(disc)).classes('disc-row')
                        ui.button('UP', on_click=lambda d=disc: move_disc_up(d)).props('flat dense')
                        ui.button('COPY', on_click=lambda d=disc: duplicate_disc(d)).props('flat dense')
                        ui.button('DELETE', on_click=lambda d=disc: delete_disc(d)).props('flat dense color=red')

        def bag_changed():
            render_bag()
            update_display()

        def add_disc():
            name = (new_name_input.value or '').strip()
            if not name:
                ui.notify('Give the disc a name first')
                return
            orchestrator.inventory.add(Disc(
                name=name,
                brand=(new_brand_input.value or '').strip(),
                speed=int(new_speed_input.value or 0),
                glide=int(new_glide_input.value or 0),
                turn=int(new_turn_input.value or 0),
                fade=int(new_fade_input.value or 0),
                stability=new_stability_select.value,
            ))
            new_name_input.set_value('')
            bag_changed()

        def duplicate_disc(disc: Disc):
            orchestrator.inventory.duplicate(disc.name)
            bag_changed()

        def delete_disc(disc: Disc):
            orchestrator.inventory.delete(disc.name)
            bag_changed()

        def move_disc_up(disc: Disc):
            index = orchestrator.inventory.discs.index(disc)
            if index > 0:
                orchestrator.inventory.move(index, index - 1)
                bag_changed()

        for widget in (throw_select, wind_dir_select, wind_speed_input,
                       temperature_input, elevation_input, humidity_input):
            widget.on_value_change(lambda _: on_form_change())
        heading_input.on_value_change(lambda _: on_heading_change())

        render_courses()
        render_bag()

        async def initial_load():
            # Live weather only when a location has been provided
            await asyncio.get_event_loop().run_in_executor(None, orchestrator.refresh_weather)
            sync_form()
            update_display()
            try:
                await ui.run_javascript('''
                    document.getElementById('loading-overlay').classList.add('fade-out');
                ''', timeout=5.0)
            except TimeoutError:
                # Client may have disconnected - content is already displayed
                pass

        ui.timer(0.1, initial_load, once=True)


if __name__ in {"__main__", "__mp_main__"}:
    ui.run(
        title='Disc Wind Caddie',
        host='0.0.0.0',
        port=Config.PORT,
        reload=False  # Disable reload in production
    )

# main.py
"""
Main entry point for the particle application.

This script orchestrates the whole lifecycle:
1. Loads configuration from `config.json`.
2. Initializes the logging system.
3. Opens the window and sets up the particle field.
4. Runs the frame loop: input, update, draw.
5. Handles clean shutdown.
"""
import logging
from utils import setup_logging, load_config
import cProfile
import pstats
import io


def run(visualizer, field, run_params) -> int:
    """
    Runs the frame loop until the window closes or max_frames is reached.

    Returns the number of frames executed.
    """
    # A non-positive throttle turns periodic logging off.
    log_throttle = run_params.get('log_throttle_steps', 300)
    max_frames = run_params.get('max_frames') # None runs until closed

    frame_num = 0
    running = True
    while running:
        dt = visualizer.tick()

        # The visualizer returns False once the user quits.
        if not visualizer.handle_input(field):
            break

        field.step(dt)
        visualizer.draw(field)
        frame_num += 1

        # Hot loops must throttle logs
        if log_throttle and log_throttle > 0 and frame_num % log_throttle == 0:
            logging.info(
                f"Frame {frame_num} | {len(field)} particles alive, "
                f"{field.total_spawned} spawned in total."
            )
            logging.debug(f"Frame {frame_num} | dt: {dt:.4f}s")

        if max_frames is not None and frame_num >= max_frames:
            logging.info(f"Reached max_frames ({max_frames}). Stopping.")
            running = False
    return frame_num


def main():
    """
    The main function to run the application.
    """
    # Logging is not set up yet, so we use a print for this one error.
    try:
        config = load_config('config.json')
    except Exception as e:
        print(f"FATAL: Could not load config.json. Error: {e}")
        return

    setup_logging(config)

    logging.info("--- Particles Starting ---")

    sim_params = config.get('simulation_parameters', {})
    run_params = config.get('run_control', {})
    vis_params = config.get('visualization', {})

    from simulation import ParticleField
    from visualization import Visualizer

    # The visualizer determines the screen dimensions, so it comes first.
    visualizer = Visualizer(vis_params)
    field = ParticleField(sim_params, visualizer.width, visualizer.height)

    profiler = cProfile.Profile() if run_params.get('profile', False) else None

    if profiler:
        profiler.enable()
    try:
        frames = run(visualizer, field, run_params)
    finally:
        if profiler:
            profiler.disable()
        visualizer.close()
    logging.info(f"Frame loop finished after {frames} frames.")

    if profiler:
        logging.info("--- Performance Profile ---")
        s = io.StringIO()
        # Sort by cumulative time spent in the function
        stats = pstats.Stats(profiler, stream=s).sort_stats('cumtime')
        stats.print_stats(20)
        logging.info(f"\n{s.getvalue()}")

    logging.info("--- Particles Shutting Down ---")


if __name__ == "__main__":
    main()

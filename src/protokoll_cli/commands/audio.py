# -*- coding: utf-8 -*-
"""
Audio processing commands (process, batch).

Both run for minutes on the server side, so they raise the request
timeout well above the SDK default and render progress notifications.
"""

import click

from ..display import out, show_success
from ..progress import ProgressReporter
from .common import call_json, current_config, fail

PROCESS_TIMEOUT = 10 * 60
BATCH_TIMEOUT = 30 * 60


@click.command("process", epilog="""\b
Examples:
  protokoll process recording.m4a
  protokoll process audio.m4a --project weekly-review
  protokoll process /path/to/audio.wav --output ~/transcripts
""")
@click.argument("audio_file")
@click.option("--project", "-p", "project_id", default=None, help="Specific project ID for routing")
@click.option("--output", "-o", "output_directory", default=None, help="Override output directory")
@click.option("--model", "-m", default=None, help="LLM model for enhancement")
@click.option("--transcription-model", default=None, help="Transcription model (default: whisper-1)")
def process(audio_file, project_id, output_directory, model, transcription_model):
    """🎙️  Process an audio file through the transcription pipeline."""
    out("Processing audio file...\n")
    reporter = ProgressReporter("Transcribing")
    try:
        data = call_json("protokoll_process_audio", {
            "audioFile": audio_file,
            "projectId": project_id,
            "outputDirectory": output_directory,
            "model": model,
            "transcriptionModel": transcription_model,
        }, progress=reporter, timeout=PROCESS_TIMEOUT)
    finally:
        reporter.finish()
    if data is None:
        return

    out()
    show_success("Audio processed successfully\n")
    if data.get("outputPath"):
        out(f"Output: {data['outputPath']}")
    if data.get("title"):
        out(f"Title: {data['title']}")
    if data.get("project"):
        out(f"Project: {data['project']}")
    if data.get("duration"):
        out(f"Duration: {data['duration']}")
    if data.get("message"):
        out(f"\n{data['message']}")


@click.command("batch", epilog="""\b
Examples:
  protokoll batch ~/recordings
  protokoll batch /media/audio --output ~/transcripts
  protokoll batch                          # Uses inputDirectory from config
""")
@click.argument("input_directory", required=False)
@click.option("--output", "-o", "output_directory", default=None, help="Override output directory")
@click.option("--extensions", "-e", default=None,
              help="Audio extensions (comma-separated, default: m4a,mp3,wav,webm)")
def batch(input_directory, output_directory, extensions):
    """📦 Process multiple audio files in a directory."""
    config = current_config()
    input_directory = input_directory or config.input_directory
    if not input_directory:
        fail("inputDirectory is required. Provide it as an argument or in your config file.")
    output_directory = output_directory or config.output_directory

    out("Batch processing audio files...\n")
    out(f"Input directory: {input_directory}")
    if output_directory:
        out(f"Output directory: {output_directory}")
    out()

    extension_list = [e.strip() for e in extensions.split(",") if e.strip()] if extensions else None

    reporter = ProgressReporter("Batch processing")
    try:
        data = call_json("protokoll_batch_process", {
            "inputDirectory": input_directory,
            "outputDirectory": output_directory,
            "extensions": extension_list,
        }, progress=reporter, timeout=BATCH_TIMEOUT)
    finally:
        reporter.finish()
    if data is None:
        return

    out()
    show_success("Batch processing complete\n")
    out(f"Processed: {data.get('processedCount') or 0} files")
    out(f"Failed: {data.get('failedCount') or 0} files")

    results = data.get("results")
    if isinstance(results, list):
        out("\nResults:")
        for r in results:
            mark = "✓" if r.get("success") else "✗"
            out(f"  {mark} {r.get('filename') or r.get('file')}")
            if r.get("outputPath"):
                out(f"    → {r['outputPath']}")

import os
import shutil
import subprocess

APP_NAME = "ToDoTracker"


def build() -> None:
    # 1) Build a single-file executable.
    print("Running PyInstaller...")
    subprocess.run([
        "pyinstaller",
        "--noconsole",
        "--onefile",
        "--name", APP_NAME,
        "main.py"
    ], check=True)

    # 2) Prepare release directory.
    dist_dir = "dist"
    release_dir = os.path.join(dist_dir, f"{APP_NAME}_v1.0")

    if os.path.exists(release_dir):
        shutil.rmtree(release_dir)
    os.makedirs(release_dir)
    print(f"Created release directory: {release_dir}")

    # 3) Copy runtime files.
    exe_name = f"{APP_NAME}.exe" if os.name == "nt" else APP_NAME
    exe_source = os.path.join(dist_dir, exe_name)
    if not os.path.exists(exe_source):
        print(f"Error: {exe_name} not found!")
        return
    shutil.move(exe_source, os.path.join(release_dir, exe_name))
    print(f"Moved executable to: {release_dir}")

    # Firestore credentials are optional; without them the app runs local-only.
    if os.path.exists("credentials.json"):
        shutil.copy("credentials.json", os.path.join(release_dir, "credentials.json"))
        print("Copied credentials.json")
    else:
        print("Warning: credentials.json not found.")

    # 4) Create writable app data directory with settings.
    data_dir = os.path.join(release_dir, "data")
    os.makedirs(data_dir, exist_ok=True)
    settings_file = os.path.join("data", "settings.json")
    if os.path.exists(settings_file):
        shutil.copy(settings_file, os.path.join(data_dir, "settings.json"))
        print("Copied data/settings.json")

    # 5) Cleanup build artifacts.
    print("Cleaning up...")
    if os.path.exists("build"):
        shutil.rmtree("build")

    spec_file = f"{APP_NAME}.spec"
    if os.path.exists(spec_file):
        os.remove(spec_file)

    print("Done! Distribution package is ready at:", release_dir)


if __name__ == "__main__":
    build()

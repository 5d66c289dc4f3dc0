"""Static payloads written into an electronized project."""

from __future__ import annotations

import base64
import json

from electronize_cli.core.config import DEFAULT_APP_ID, DEFAULT_PRODUCT_NAME

MAIN_TS = """import { app, BrowserWindow } from "electron";
import path from "path";
import fs from "fs";
import { fileURLToPath } from "url";

const __filename = fileURLToPath(import.meta.url);
const __dirname = path.dirname(__filename);

// Define paths for different build environments
const DIST_PATH = app.isPackaged
  ? path.join(__dirname, "../dist-react")
  : path.join(__dirname, "../../dist-react");

const PUBLIC_PATH = app.isPackaged
  ? path.join(process.resourcesPath, "app", "public")
  : path.join(__dirname, "../../public");

// Set environment variables
process.env.DIST = DIST_PATH;
process.env.PUBLIC = PUBLIC_PATH;
process.env.VITE_DEV_SERVER_URL = process.env.VITE_DEV_SERVER_URL || "";
process.env.NODE_ENV = process.env.NODE_ENV || "production";

let win: BrowserWindow | null = null;
const VITE_DEV_SERVER_URL = process.env.VITE_DEV_SERVER_URL;

function createWindow() {
  const iconPath = path.join(
    app.isPackaged ? PUBLIC_PATH : path.join(__dirname, "../../public"),
    process.platform === "win32" ? "favicon.ico" : "icon.png"
  );

  win = new BrowserWindow({
    width: 1200,
    height: 800,
    icon: iconPath,
    webPreferences: {
      nodeIntegration: false,
      contextIsolation: true,
      preload: path.join(__dirname, "preload.js"),
      devTools: !app.isPackaged,
    },
  });

  win.setMenuBarVisibility(false);
  try { win.setMenu(null); } catch { /* ignore */ }

  if (VITE_DEV_SERVER_URL) {
    win.loadURL(VITE_DEV_SERVER_URL);
  } else {
    const indexPath = path.join(DIST_PATH, "index.html");
    console.log("Loading index.html from:", indexPath);

    if (fs.existsSync(indexPath)) {
      win.loadFile(indexPath);
    } else {
      console.error("index.html not found at:", indexPath);
    }
  }
}

app.on("window-all-closed", () => {
  win = null;
  if (process.platform !== "darwin") {
    app.quit();
  }
});

app.whenReady().then(createWindow);

app.on("activate", () => {
  if (BrowserWindow.getAllWindows().length === 0) {
    createWindow();
  }
});
"""

PRELOAD_TS = """import { contextBridge, ipcRenderer } from "electron";

const electronAPI = {
  ipcRenderer: {
    send: (channel: string, data: any) => ipcRenderer.send(channel, data),
    on: (channel: string, func: (...args: any[]) => void) =>
      ipcRenderer.on(channel, (_event, ...args) => func(...args)),
    once: (channel: string, func: (...args: any[]) => void) =>
      ipcRenderer.once(channel, (_event, ...args) => func(...args)),
    removeListener: (channel: string, func: (...args: any[]) => void) =>
      ipcRenderer.removeListener(channel, func),
  },
};

contextBridge.exposeInMainWorld("electron", electronAPI);

ipcRenderer.on("main-process-message", (_event, message) => {
  console.log("[Receive Main-process message]:", message);
});

console.log("Preload script loaded!");
"""

INDEX_HTML_TEMPLATE = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8"/>
    <meta name="viewport" content="width=device-width,initial-scale=1"/>
    <link rel="icon" href="/favicon.ico"/>
    <title>{title}</title>
  </head>
  <body>
    <div id="root"></div>
    {script_tag}
  </body>
</html>
"""

TSCONFIG_ELECTRON = {
    "extends": "./tsconfig.node.json",
    "compilerOptions": {
        "outDir": "src/electron",
        "lib": ["ES2022"],
        "target": "ES2022",
        "module": "NodeNext",
        "moduleResolution": "NodeNext",
        "allowSyntheticDefaultImports": True,
        "esModuleInterop": True,
        "skipLibCheck": True,
        "strict": True,
        "resolveJsonModule": True,
        "noEmit": True,
        "allowImportingTsExtensions": True,
    },
    "include": ["src/electron/**/*.ts"],
    "exclude": ["node_modules", "dist-react", "src/electron/main.ts"],
}

VITE_ELECTRON_CONFIG = """import { defineConfig } from 'vite';
import react from '@vitejs/plugin-react';
import electron from 'vite-plugin-electron';
import renderer from 'vite-plugin-electron-renderer';
import path from 'path';

export default defineConfig({
  base: './',
  plugins: [
    react(),
    electron([
      {
        entry: 'src/electron/main.ts',
        onstart(args) { args.reload(); },
        vite: {
          build: {
            sourcemap: true,
            minify: false,
            outDir: 'src/electron',
            rollupOptions: { external: ['electron'] },
          },
        },
      },
      {
        entry: 'src/electron/preload.ts',
        onstart(args) { args.reload(); },
        vite: {
          build: {
            sourcemap: 'inline',
            minify: false,
            outDir: 'src/electron',
            rollupOptions: { external: ['electron'] },
          },
        },
      },
    ]),
    renderer(),
  ],
  resolve: { alias: { '@': path.resolve(__dirname, './src') } },
  optimizeDeps: { exclude: ['lucide-react'] },
  clearScreen: false,
});
"""

VITE_RENDERER_CONFIG = """import path from 'path';
import react from '@vitejs/plugin-react';
import { defineConfig } from 'vite';

export default defineConfig({
  plugins: [react()],
  base: './',
  resolve: { alias: { '@': path.resolve(__dirname, './src') } },
  optimizeDeps: { exclude: ['lucide-react'] },
  build: { outDir: 'dist-react' },
});
"""

ELECTRON_BUILDER_TEMPLATE = """appId: {app_id}
productName: {product_name}
directories:
  output: release
files:
  - dist-react/**/*
  - src/electron/**
  - public/**
win:
  target:
    - nsis
mac:
  target:
    - dmg
linux:
  target:
    - AppImage
"""

DESIRED_SCRIPTS: dict[str, str] = {
    "dev:react": "vite",
    "dev:electron": "electron .",
    "dev": 'concurrently "npm run dev:react" "npm run dev:electron"',
    "lint": "eslint .",
    "preview": "vite preview",
    "build": "tsc -b && vite build",
    "electron:tsc": "tsc -p tsconfig.electron.json",
    "electron:dev": "cross-env NODE_ENV=development npm run electron:tsc && vite --config vite.electron.config.ts",
    "electron:build": "cross-env NODE_ENV=production npm run electron:tsc && vite build --config vite.renderer.config.ts",
    "build:electron": "npx electron-builder --config electron-builder.yml --dir",
    "package": "npx electron-builder --config electron-builder.yml",
}

DESIRED_DEV_DEPENDENCIES: dict[str, str] = {
    "cross-env": "^10.0.0",
    "electron": "^32.1.2",
    "electron-builder": "^25.0.5",
    "vite": "^5.4.2",
    "vite-plugin-electron": "^0.29.0",
    "vite-plugin-electron-renderer": "^0.14.6",
    "concurrently": "^8.2.2",
    "wait-on": "^7.0.1",
    "typescript": "^5.2.0",
}

# 1x1 transparent PNG, used for both favicon.ico and icon.png.
PLACEHOLDER_ICON = base64.b64decode(
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAQAAAC1HAwCAAAAC0lEQVR4nGNgYAAAAAMAASsJTYQAAAAASUVORK5CYII="
)


def render_index_html(script_tag: str, title: str = "Electronized App") -> str:
    return INDEX_HTML_TEMPLATE.format(title=title, script_tag=script_tag)


def render_tsconfig_electron() -> str:
    return json.dumps(TSCONFIG_ELECTRON, indent=2)


def render_electron_builder(
    product_name: str = DEFAULT_PRODUCT_NAME,
    app_id: str = DEFAULT_APP_ID,
) -> str:
    return ELECTRON_BUILDER_TEMPLATE.format(product_name=product_name, app_id=app_id)

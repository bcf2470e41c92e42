"""
Static files bundled into an exported project.
"""

import json

PACKAGE_JSON = {
    "name": "exported-component",
    "version": "1.0.0",
    "private": True,
    "dependencies": {
        "react": "^18.2.0",
        "react-dom": "^18.2.0",
        "next": "^14.0.0",
    },
    "devDependencies": {
        "tailwindcss": "^3.4.0",
        "postcss": "^8.4.0",
        "autoprefixer": "^10.4.0",
        "typescript": "^5.0.0",
        "@types/react": "^18.2.0",
    },
}

TAILWIND_CONFIG = """/** @type {import('tailwindcss').Config} */
module.exports = {
  content: [
    './src/**/*.{js,ts,jsx,tsx}',
  ],
  theme: {
    extend: {},
  },
  plugins: [],
}
"""

POSTCSS_CONFIG = """module.exports = {
  plugins: {
    tailwindcss: {},
    autoprefixer: {},
  },
}
"""

GLOBALS_CSS = """@tailwind base;
@tailwind components;
@tailwind utilities;
"""

README_TEMPLATE = """# Exported Component

This component was generated with uiforge.

## Getting Started

1. Install dependencies:
```bash
npm install
```

2. Import the component:
```jsx
import {name} from './components/{name}';
```

3. Use it in your project!
"""


def package_json() -> str:
    return json.dumps(PACKAGE_JSON, indent=2) + "\n"


def readme(component_name: str) -> str:
    return README_TEMPLATE.replace("{name}", component_name)

"""Static rule parameters: scripts, package shapes and dependency pins."""

from typing import Any, Final


# Script value telling the engine the script must not exist.
ABSENT_SCRIPT: Final[dict[str, Any]] = {"options": [None], "fixValue": None}


ROOT_SCRIPTS: Final[dict[str, Any]] = {
    "build": "turbo build",
    "check-eslint": "eslint packages/*/src",
    "check-jest": "NODE_OPTIONS='--experimental-vm-modules --no-warnings' jest --passWithNoTests",
    "check-prettier": "prettier --check .",
    "check-typescript": "tsc --build --pretty packages/*/tsconfig.json",
    "ci:publish-snapshot": (
        "pnpm prepublishOnly && pnpm check-eslint && pnpm changeset version --snapshot"
        " && pnpm publish -r --tag snapshot --access public --report-summary --no-git-checks"
    ),
    "ci:publish": "pnpm publish -r --tag next --access public --report-summary.json",
    "cloc": (
        "cloc --exclude-ext=yaml --exclude-ext=log --exclude-ext=txt --exclude-ext=json"
        " --match-d='src' --fullpath --not-match-d='node_modules|lib'  . "
    ),
    "debug:test": (
        "NODE_OPTIONS='--experimental-vm-modules --no-warnings --inspect-brk'"
        " jest --runInBand --detectOpenHandles"
    ),
    "dev-mode": (
        "concurrently -c auto --color --names 'ts    ,eslint,jest  '"
        " 'npm:watch-typescript' 'npm:watch-eslint' npm:watch-jest"
    ),
    "fix-eslint": "eslint packages/*/src --fix",
    "fix-prettier": "prettier --write .",
    "precommit": "pnpm fix-eslint && pnpm fix-prettier",
    "prepare": "husky install",
    "prepublishOnly": "pnpm run build && pnpm test",
    "test": "pnpm check-eslint && pnpm check-jest && pnpm check-prettier && pnpm check-typescript",
    "watch-eslint": "pnpm check-eslint; chokidar 'packages/*/src/**.ts' 'packages/*/src/**.tsx' -c eslint",
    "watch-jest": "pnpm check-jest --watch",
    "watch-typescript": "pnpm check-typescript --preserveWatchOutput --watch",
}


# Default shape: ESM with a CommonJS fallback.
PLAIN_PACKAGE_ENTRIES: Final[dict[str, Any]] = {
    "type": "module",
    "exports": {
        ".": {
            "types": "./dist/index.d.ts",
            "import": "./dist/index.js",
            "require": "./dist/index.cjs",
        },
    },
    "files": ["bin", "lib", "files"],
    "publishConfig": {
        "access": "public",
    },
}

PLAIN_PACKAGE_SCRIPTS: Final[dict[str, Any]] = {
    "transpile-typescript": "tsup --format esm,cjs",
}

ESM_ONLY_PACKAGE_ENTRIES: Final[dict[str, Any]] = {
    "type": "module",
    "exports": {
        ".": {
            "types": "./dist/index.d.ts",
            "import": "./dist/index.js",
        },
    },
}

ESM_ONLY_PACKAGE_SCRIPTS: Final[dict[str, Any]] = {
    "transpile-typescript": "tsup --format esm",
}

CJS_ONLY_PACKAGE_ENTRIES: Final[dict[str, Any]] = {
    "type": "commonjs",
    "exports": {
        ".": {
            "types": "./dist/index.d.ts",
            "require": "./dist/index.js",
        },
    },
}

CJS_ONLY_PACKAGE_SCRIPTS: Final[dict[str, Any]] = {
    "transpile-typescript": "tsup --format cjs",
}


ROOT_DEV_DEPENDENCIES: Final[dict[str, str]] = {
    "@changesets/cli": "^2.26.1",
    "@monorepolint/cli": "^0.5.0-alpha.108",
    "@swc/jest": "^0.2.26",
    "@typescript-eslint/eslint-plugin": "^5.60.0",
    "@typescript-eslint/parser": "^5.60.0",
    "chokidar-cli": "^3.0.0",
    "concurrently": "^8.2.0",
    "eslint": "^8.43.0",
    "eslint-import-resolver-typescript": "^3.5.5",
    "eslint-plugin-import": "^2.27.5",
    "eslint-plugin-unused-imports": "^2.0.0",
    "husky": "^8.0.3",
    "jest": "^29.5.0",
    "lint-staged": "^13.2.2",
    "prettier": "^2.8.8",
    "ts-jest": "^29.1.0",
    "tslib": "^2.5.3",
    "tsup": "^7.0.0",
    "turbo": "^1.10.5",
    "typescript": "^5.1.3",
}

PACKAGE_DEV_DEPENDENCIES: Final[dict[str, str]] = {
    "tslib": "^2.5.3",
    "typescript": "^5.1.3",
    "tsup": "^7.0.0",
}


PACKAGE_SCRIPTS: Final[dict[str, Any]] = {
    "clean": "rm -rf lib dist tsconfig.tsbuildinfo",
    "deepClean": "rm -rf lib dist tsconfig.tsbuildinfo",
    "check:prettier": ABSENT_SCRIPT,
    "check:jest": ABSENT_SCRIPT,
    "check:eslint": ABSENT_SCRIPT,
    "check:typescript": ABSENT_SCRIPT,
    "check-typescript": "tsc --build",
    "prepublishOnly": "pnpm check-typescript && pnpm transpile-typescript",
    "dev-mode": "pnpm transpile-typescript --watch",
}


TSCONFIG_TEMPLATE: Final[dict[str, Any]] = {
    "extends": "../../tsconfig.base.json",
    "compilerOptions": {
        "outDir": "lib",
        "rootDir": "src",
    },
    "exclude": ["node_modules", "lib", "dist"],
}

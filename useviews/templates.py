"""File contents written into a converted project."""

APP_VIEW = """App Vertical
alignItems center
flexGrow 1
flexShrink 1
flexBasis auto
justifyContent center
Text
fontSize 18
text < Hello Views Tools!"""

APP_VIEW_LOGIC_DOM = """import React from 'react'
import App from './App.view.js'

export default class AppLogic extends React.Component {
  render() {
    return <App {...this.props} />
  }
}"""

APP_VIEW_LOGIC_NATIVE = """import { AppLoading, Font } from 'expo'
import { Animated } from 'react-native'
import fonts from '../fonts.js'
import React from 'react'
import App from './App.view.js'

export default class AppLogic extends React.Component {
  state = {
    isReady: false,
  }

  render() {
    if (!this.state.isReady) {
      return (
        <AppLoading
          startAsync={this._cacheResourcesAsync}
          onFinish={() => this.setState({ isReady: true })}
          onError={console.warn}
        />
      );
    }

    return <App {...this.props} />
  }

  _cacheResourcesAsync() {
    return Font.loadAsync(fonts)
  }
}"""

APP_NATIVE = """import App from './src/Main/App.view.logic.js'
export default App"""

FONTS_NATIVE = """export default {
// At some point, Views will do this automatically. For now, you
// need to write your fonts by hand. Here's an example of a font used like:
// Text
// fontFamily Robot Mono
// fontWeight 300
// text hey I'm using Roboto Mono!
//
// Font definition:
//
//  'RobotoMono-300': require('./assets/fonts/RobotoMono-300.ttf'),
//
}"""

GITIGNORE = """
# views
**/*.view.js
**/Fonts/*.js"""

VIEWS_CSS = """* {
  -webkit-overflow-scrolling: touch;
  -ms-overflow-style: -ms-autohiding-scrollbar;
}
html,
body,
#root {
  height: 100%;
  margin: 0;
}
.views-block, #root {
  align-items: stretch;
  box-sizing: border-box;
  color: inherit;
  display: flex;
  flex-direction: column;
  flex-shrink: 0;
  hyphens: auto;
  margin: 0;
  outline: 0;
  overflow-wrap: break-word;
  padding: 0;
  position: relative;
  text-decoration: none;
  word-wrap: break-word;
  background-color: transparent;
  border-radius: 0;
  border: 0;
  font-family: inherit;
  font-size: inherit;
  line-height: inherit;
  margin: 0;
  padding: 0;
  text-align: left;
  white-space: normal;
}
.views-block::-moz-focus-inner {
  border: 0;
  margin: 0;
  padding: 0;
}
/* remove number arrows */
.views-block[type='number']::-webkit-outer-spin-button,
.views-block[type='number']::-webkit-inner-spin-button {
  -webkit-appearance: none;
  margin: 0;
}"""

# create-react-app files replaced by the sample View
WEB_BOILERPLATE = ["App.css", "App.js", "App.test.js", "logo.svg"]
